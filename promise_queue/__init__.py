"""
Serialized Promise Queue

Runs asynchronous tasks strictly one after another on an asyncio
event loop, resetting itself when a task fails.
"""

# defined before the imports below, core.config reads it
__version__ = "1.0.0"

from .queue import SerialQueue  # noqa: E402

__all__ = ["SerialQueue"]
