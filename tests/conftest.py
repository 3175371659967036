"""
Shared pytest fixtures for avlreplay tests.
"""

import logging

import pytest

from avlreplay import BalancedTreeEngine


@pytest.fixture
def engine() -> BalancedTreeEngine:
    """A fresh, empty engine."""
    return BalancedTreeEngine()


@pytest.fixture
def seeded_engine() -> BalancedTreeEngine:
    """Engine holding 30, 20, 40, 10, 25, 50, 5 (no rotations needed to build).

    Shape::

                30
              /    \\
            20      40
           /  \\       \\
         10    25      50
        /
       5
    """
    engine = BalancedTreeEngine()
    engine.build([30, 20, 40, 10, 25, 50, 5])
    return engine


@pytest.fixture(autouse=True)
def reset_avlreplay_logging():
    """Reset logging state before each test.

    Ensures tests start with a clean logging configuration:
    - Removes all handlers except NullHandler
    - Resets level to NOTSET (inherit from parent)
    """
    logger = logging.getLogger("avlreplay")

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        if not isinstance(handler, logging.NullHandler):
            handler.close()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)

    yield

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        if not isinstance(handler, logging.NullHandler):
            handler.close()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)
