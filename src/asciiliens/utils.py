"""
ASCIIliens utils
"""

from __future__ import annotations

import logging

from asciiliens.constants import SCORE_MAX, SCORE_MIN

logger = logging.getLogger("asciiliens")


def configure_logging(level: int = logging.INFO) -> None:
    """
    Configure the root handler for the game.

    :param level: Logging level
    :type level: int
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.setLevel(level)


def saturating_add(value: int, delta: int) -> int:
    """
    Add ``delta`` to ``value`` without leaving the score range.

    :param value: Current value
    :type value: int

    :param delta: Amount to add (negative to subtract)
    :type delta: int

    :return: The clamped sum
    :rtype: int
    """
    return max(SCORE_MIN, min(SCORE_MAX, value + delta))


def center_text(text: str, width: int) -> str:
    """Center ``text`` in a line of ``width`` columns, truncating if needed."""
    if len(text) >= width:
        return text[:width]
    return text.center(width)
