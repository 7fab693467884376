"""
Demo Entry Point

Runs two tasks through one SerialQueue: a slow one submitted first
and a fast one submitted right after. The fast one still finishes
second, which the log shows.

Run with: python main.py
"""

import asyncio
import logging
import sys

from promise_queue.core.config import settings
from promise_queue.core.utils import get_monotonic_ms
from promise_queue.queue.serial import SerialQueue

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


def delayed(value: str, delay: float, started: float, log: list[str]):
    """Build a task that resolves to `value` after `delay` seconds."""
    async def task() -> str:
        logger.info(f"Task '{value}' starts at {get_monotonic_ms() - started:.0f}ms")
        await asyncio.sleep(delay)
        log.append(value)
        return value
    return task


async def run_demo(slow: float = 0.150, fast: float = 0.025) -> list[str]:
    """
    Submit a slow task then a fast one and wait for both.

    Args:
        slow: Delay of the first task (seconds)
        fast: Delay of the second task (seconds)

    Returns:
        Values in the order the tasks completed
    """
    queue = SerialQueue()
    started = get_monotonic_ms()
    completed: list[str] = []

    first = queue.serie(delayed("a", slow, started, completed))
    second = queue.serie(delayed("b", fast, started, completed))

    await asyncio.gather(first, second)

    logger.info(f"Completion order: {completed}")
    logger.info(f"Pending entries left: {len(queue.get_values())}")
    return completed


def main():
    print("=" * 60)
    print(f"SERIALIZED PROMISE QUEUE DEMO v{settings.version}")
    print("=" * 60)

    asyncio.run(run_demo())


if __name__ == "__main__":
    main()
