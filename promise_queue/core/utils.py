"""
Shared utility functions for the promise queue.

Contains identifier generation and time helpers used across
the queue and the token handler.
"""

import time
import uuid
from collections.abc import Container


def generate_entry_id(prefix: str = "promise-", length: int = 6) -> str:
    """
    Generate a short random pending entry identifier.

    Short ids are not collision-free on their own, callers check
    them against the keys already in use (see unique_entry_id).

    Args:
        prefix: Prefix that makes the ids recognizable in logs
        length: Number of random hex characters (1 to 32)

    Returns:
        An identifier in format '<prefix><hex>'
    """
    return f"{prefix}{uuid.uuid4().hex[:length]}"


def unique_entry_id(
    taken: Container[str],
    prefix: str = "promise-",
    length: int = 6
) -> str:
    """
    Generate an identifier that is not already in `taken`.

    Regenerates on collision until an unused identifier is found.

    Args:
        taken: The identifiers currently in use
        prefix: Identifier prefix
        length: Number of random characters

    Returns:
        An identifier absent from `taken`
    """
    entry_id = generate_entry_id(prefix, length)
    while entry_id in taken:
        entry_id = generate_entry_id(prefix, length)
    return entry_id


def get_monotonic_ms() -> float:
    """
    Get a monotonic clock reading in milliseconds.

    Returns:
        Milliseconds from an arbitrary, never-decreasing origin
    """
    return time.monotonic() * 1000
