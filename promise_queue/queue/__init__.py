"""
Queue module for serialized task execution.
"""

from .serial import SerialQueue

__all__ = ["SerialQueue"]
