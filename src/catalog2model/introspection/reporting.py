"""Recording of recoverable problems found during introspection."""

from typing import Any, Dict, List, Optional
from catalog2model.config.logging import get_logger
from catalog2model.ir.diagnostics import Diagnostic

logger = get_logger(__name__)


def report(
    diagnostics: Optional[List[Diagnostic]],
    code: str,
    location: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    severity: str = "warning",
) -> Diagnostic:
    """
    Log a diagnostic and append it to the run's diagnostic list.

    Args:
        diagnostics: List owned by the current run (None to only log)
        code: Diagnostic code, e.g. "DANGLING_RELATION"
        location: "table" or "table.column"
        message: Human-readable description
        details: Structured context for callers and tests
        severity: "warning" or "info"

    Returns:
        The recorded Diagnostic
    """
    diagnostic = Diagnostic(
        code=code,
        severity=severity,
        location=location,
        message=message,
        details=details or {},
    )
    if severity == "info":
        logger.info(f"[{code}] {message}")
    else:
        logger.warning(f"[{code}] {message}")
    if diagnostics is not None:
        diagnostics.append(diagnostic)
    return diagnostic
