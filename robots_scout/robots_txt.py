# robots_scout/robots_txt.py
"""
Parsed robots.txt document and the allow/disallow decision.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Final, List, Optional

from robots_scout.logger import logger
from robots_scout.rule_set import Group, RuleSet
from robots_scout.rules import Match

__all__ = ["RobotsTxt", "ROBOTS_TXT_PATH"]

ROBOTS_TXT_PATH: Final[str] = "/robots.txt"


@dataclass(frozen=True, init=False)
class RobotsTxt(RuleSet):
    """Top-level rule set of a robots.txt file.

    Evaluation never mutates the document, so one instance can serve any
    number of concurrent callers.
    """

    @property
    def groups(self) -> List[Group]:
        return [rule for rule in self.rules if isinstance(rule, Group)]

    def matching_groups(self, user_agent: str) -> List[Group]:
        """Valid groups that apply to *user_agent*, in document order."""
        return [group for group in self.groups if group.valid and group.applies(user_agent)]

    def matches(self, user_agent: str, path_and_query: str) -> List[Match]:
        """Every path rule match from every applicable group."""
        found: List[Match] = []
        for group in self.matching_groups(user_agent):
            for rule in group.path_rules:
                match = rule.match(path_and_query)
                if match is not None:
                    found.append(match)
        return found

    def explain(self, user_agent: str, path_and_query: str) -> Optional[Match]:
        """Return the match that decides access, or ``None`` if nothing decides.

        The longest match wins; at equal length an Allow rule beats a
        Disallow rule (RFC 9309 section 2.2.2).
        """
        if path_and_query == ROBOTS_TXT_PATH:
            return None
        found = self.matches(user_agent, path_and_query)
        if not found:
            return None
        return max(found, key=lambda match: (match.length, match.rule.allows))

    def allow(self, user_agent: str, path_and_query: str) -> bool:
        """Is *path_and_query* allowed for *user_agent*?

        ``/robots.txt`` itself is always allowed, and so is anything no rule
        matches.
        """
        top = self.explain(user_agent, path_and_query)
        allowed = top is None or top.rule.allows
        logger.debug(
            "%s %s for %r (%s)",
            "Allow" if allowed else "Disallow",
            path_and_query,
            user_agent,
            f"{top.rule.name}: {top.rule.value}" if top else "no matching rule",
        )
        return allowed

    def disallow(self, user_agent: str, path_and_query: str) -> bool:
        """Logical negation of :meth:`allow`."""
        return not self.allow(user_agent, path_and_query)
