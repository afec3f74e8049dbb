# robots_scout/errors.py
"""
Exception hierarchy for RobotsScout.

Only input that cannot be read as text is an error. Malformed directives are
kept as data (see :class:`robots_scout.rules.InvalidLine`).
"""
from __future__ import annotations


class RobotsError(Exception):
    """Base class for all RobotsScout errors."""


class DecodeError(RobotsError):
    """robots.txt content could not be turned into text."""


class BinaryInputError(DecodeError):
    """The input does not look like text at all."""


class InvalidEncodingError(DecodeError):
    """The input looks like text, but its encoding is invalid."""


__all__ = ["RobotsError", "DecodeError", "BinaryInputError", "InvalidEncodingError"]
