# robots_scout/rule_set.py
"""
Ordered, immutable collections of rules: the generic :class:`RuleSet` and the
user-agent :class:`Group`.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Tuple, TypeVar, Union

from robots_scout.rules import InvalidLine, PathRule, Rule, UserAgentRule

__all__ = ["RuleSet", "Group", "Entry"]

Entry = Union["Group", Rule, InvalidLine]

_RuleSetT = TypeVar("_RuleSetT", bound="RuleSet")


@dataclass(frozen=True, init=False)
class RuleSet:
    """Ordered sequence of groups, rules and invalid lines."""

    rules: Tuple[Entry, ...]

    def __init__(self, rules: Iterable[Entry] = ()) -> None:
        object.__setattr__(self, "rules", tuple(rules))
        self.__post_init__()

    def __post_init__(self) -> None:
        """Hook for subclasses that precompute derived state."""

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def merge(self: _RuleSetT, other: RuleSet) -> _RuleSetT:
        """Make a new set of the same type with the rules of *other* appended."""
        return type(self)(self.rules + other.rules)


@dataclass(frozen=True, init=False)
class Group(RuleSet):
    """An access group: user-agent lines followed by the path rules they share.

    A group is valid when it has at least one valid user-agent rule. Invalid
    groups stay in the document but never take part in evaluation.
    """

    valid: bool = field(init=False, repr=False, compare=False)
    applies_to_all: bool = field(init=False, repr=False, compare=False)
    user_agent_re: Optional[re.Pattern] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        agents = [rule for rule in self.user_agents if rule.valid]
        specific = [rule.value for rule in agents if not rule.matches_all]
        object.__setattr__(self, "valid", bool(agents))
        object.__setattr__(self, "applies_to_all", any(rule.matches_all for rule in agents))
        object.__setattr__(
            self,
            "user_agent_re",
            re.compile("|".join(map(re.escape, specific)), re.IGNORECASE) if specific else None,
        )

    @property
    def user_agents(self) -> Tuple[UserAgentRule, ...]:
        return tuple(rule for rule in self.rules if isinstance(rule, UserAgentRule))

    @property
    def path_rules(self) -> Tuple[PathRule, ...]:
        return tuple(rule for rule in self.rules if isinstance(rule, PathRule))

    def applies(self, user_agent: str) -> bool:
        """Does this group apply to the given crawler identity?

        A product token applies when it occurs anywhere in *user_agent*,
        ignoring case, so ``Googlebot`` covers ``Googlebot-News/2.1``.
        """
        if self.applies_to_all:
            return True
        if self.user_agent_re is None:
            return False
        return self.user_agent_re.search(user_agent) is not None
