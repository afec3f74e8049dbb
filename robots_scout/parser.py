# robots_scout/parser.py
"""
robots.txt parser following RFC 9309 (including errata).

The parser never fails on malformed directives: unknown keys become generic
:class:`Rule` objects and lines that do not look like ``key: value`` are kept
as :class:`InvalidLine`. Encoding problems are handled before parsing, see
:mod:`robots_scout.encoding`.
"""
from __future__ import annotations

import re
from itertools import groupby
from typing import Iterable, List, Sequence, Tuple, Union

from robots_scout.logger import logger
from robots_scout.robots_txt import RobotsTxt
from robots_scout.rule_set import Group
from robots_scout.rules import InvalidLine, PathRule, Rule, RuleKind, UserAgentRule

__all__ = ["Parser"]

Line = Union[Rule, InvalidLine]

# Plausible rule detection only. Names start with a letter and may contain
# digits, underscores and hyphens; RFC 9309 only says they are case-insensitive.
_RULE_KEY_RE = re.compile(r"\A[A-Za-z][A-Za-z0-9_-]*\s*:")
# RFC 9309 end of line: CR, LF or CRLF
_EOL_RE = re.compile(r"\r\n|\r|\n")


class Parser:
    """Turns decoded robots.txt text into a :class:`RobotsTxt` tree."""

    def __init__(self, text: str) -> None:
        self.text = text

    def parse(self) -> RobotsTxt:
        lines = [self.parse_line(line) for line in self._content_lines()]
        grouped, standalone = self._partition(lines)
        groups = self._group(grouped)
        logger.debug(
            "Parsed %d lines into %d groups and %d standalone entries",
            len(lines),
            len(groups),
            len(standalone),
        )
        return RobotsTxt([*groups, *standalone])

    def _content_lines(self) -> Iterable[str]:
        for raw in _EOL_RE.split(self.text):
            line = raw.split("#", 1)[0].strip()
            if line:
                yield line

    @staticmethod
    def parse_line(line: str) -> Line:
        """Classify a single comment-free, stripped line."""
        if not _RULE_KEY_RE.match(line):
            return InvalidLine(line)
        key, value = (part.strip() for part in line.split(":", 1))
        kind = RuleKind.from_name(key)
        if kind is RuleKind.USER_AGENT:
            return UserAgentRule(value)
        if kind is RuleKind.ALLOW:
            return PathRule.allow(value)
        if kind is RuleKind.DISALLOW:
            return PathRule.disallow(value)
        return Rule(key, value)

    @staticmethod
    def _partition(lines: Sequence[Line]) -> Tuple[List[Rule], List[Line]]:
        """Split lines into group members and standalone entries.

        Path rules seen before the first user-agent can not belong to a group.
        """
        grouped: List[Rule] = []
        standalone: List[Line] = []
        for line in lines:
            if isinstance(line, UserAgentRule):
                grouped.append(line)
            elif isinstance(line, PathRule) and grouped:
                grouped.append(line)
            else:
                standalone.append(line)
        return grouped, standalone

    @staticmethod
    def _group(rules: Sequence[Rule]) -> List[Group]:
        """A new group starts wherever a user-agent follows a path rule."""
        groups: List[Group] = []
        current: List[Rule] = []
        for is_agent, run in groupby(rules, key=lambda rule: isinstance(rule, UserAgentRule)):
            if is_agent and current:
                groups.append(Group(current))
                current = []
            current.extend(run)
        if current:
            groups.append(Group(current))
        return groups
