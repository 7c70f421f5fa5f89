"""Utilities for loading catalog snapshots and saving models as JSON files."""

from pathlib import Path
from pydantic import TypeAdapter
from catalog2model.ir.model import IntrospectionResult
from catalog2model.ir.rows import CatalogSnapshot


def _read_json_text(path: Path, what: str) -> str:
    if not path.exists():
        raise FileNotFoundError(f"{what} file not found: {path}")

    content = path.read_text(encoding="utf-8").strip()
    if not content:
        raise ValueError(
            f"{what} file is empty or corrupted: {path}. "
            f"The file exists but contains no valid JSON data."
        )
    return content


def load_snapshot_from_json(snapshot_path: Path) -> CatalogSnapshot:
    """
    Load a CatalogSnapshot from a JSON file.

    Row objects may use snake_case keys or the catalog's upper-case labels.

    Args:
        snapshot_path: Path to the JSON file

    Returns:
        Loaded CatalogSnapshot instance

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty or not a valid snapshot
    """
    snapshot_path = Path(snapshot_path)
    content = _read_json_text(snapshot_path, "Snapshot")
    try:
        return TypeAdapter(CatalogSnapshot).validate_json(content)
    except Exception as e:
        raise ValueError(f"Failed to load snapshot from {snapshot_path}: {e}") from e


def load_result_from_json(result_path: Path) -> IntrospectionResult:
    """
    Load an IntrospectionResult previously written by save_result_to_json.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty or not a valid result
    """
    result_path = Path(result_path)
    content = _read_json_text(result_path, "Model")
    try:
        return TypeAdapter(IntrospectionResult).validate_json(content)
    except Exception as e:
        raise ValueError(f"Failed to load model from {result_path}: {e}") from e


def save_result_to_json(result: IntrospectionResult, result_path: Path) -> None:
    """
    Save an IntrospectionResult to a JSON file.

    Note:
        Creates parent directories if they don't exist.
    """
    result_path = Path(result_path)
    result_path.parent.mkdir(parents=True, exist_ok=True)
    result_path.write_text(result.model_dump_json(indent=2), encoding="utf-8")
