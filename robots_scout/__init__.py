# robots_scout/__init__.py
"""
RobotsScout package initializer.
robots.txt parsing and access evaluation (RFC 9309).
"""
from __future__ import annotations

from typing import Union

__version__ = "0.1.0"

from robots_scout.encoding import DEFAULT_MIN_CONFIDENCE, decode_text
from robots_scout.errors import BinaryInputError, DecodeError, InvalidEncodingError, RobotsError
from robots_scout.parser import Parser
from robots_scout.robots_txt import RobotsTxt
from robots_scout.rule_set import Group, RuleSet
from robots_scout.rules import InvalidLine, Match, PathRule, Rule, RuleKind, UserAgentRule


def parse(content: Union[str, bytes], *, min_confidence: float = DEFAULT_MIN_CONFIDENCE) -> RobotsTxt:
    """Decode and parse robots.txt *content*."""
    return Parser(decode_text(content, min_confidence)).parse()


__all__ = [
    "__version__",
    "parse",
    "Parser",
    "RobotsTxt",
    "RuleSet",
    "Group",
    "Rule",
    "RuleKind",
    "UserAgentRule",
    "PathRule",
    "InvalidLine",
    "Match",
    "RobotsError",
    "DecodeError",
    "BinaryInputError",
    "InvalidEncodingError",
]
