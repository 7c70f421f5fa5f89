"""Utility functions for common operations."""

from .model_io import load_result_from_json, load_snapshot_from_json, save_result_to_json

__all__ = [
    "load_result_from_json",
    "load_snapshot_from_json",
    "save_result_to_json",
]
