"""
Core module containing configuration and utilities.
"""

from .config import settings
from .utils import generate_entry_id, unique_entry_id, get_monotonic_ms

__all__ = ["settings", "generate_entry_id", "unique_entry_id", "get_monotonic_ms"]
