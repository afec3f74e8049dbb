# robots_scout/rules.py
"""
Rule value types produced by the parser.

Every rule is an immutable value object. Derived state (validity, compiled
path pattern) is computed once at construction and excluded from equality,
so parsed documents can be shared between threads without locking.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Optional

from robots_scout.matcher import PathPattern, compile_pattern, is_valid_path_pattern, match_length

__all__ = ["RuleKind", "Rule", "UserAgentRule", "PathRule", "InvalidLine", "Match"]


class RuleKind(str, Enum):
    """Closed set of rule kinds understood by the evaluator."""

    USER_AGENT = "user-agent"
    ALLOW = "allow"
    DISALLOW = "disallow"
    OTHER = "other"

    @classmethod
    def from_name(cls, name: str) -> RuleKind:
        try:
            return cls(name.lower())
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class Rule:
    """Generic ``name: value`` directive without special handling (e.g. ``Sitemap``)."""

    name: str
    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", self.name.lower())

    @property
    def kind(self) -> RuleKind:
        return RuleKind.from_name(self.name)


# A product token: letters, digits, underscores and hyphens, or a single "*".
_PRODUCT_TOKEN_RE = re.compile(r"\A(?:[A-Za-z0-9_-]+|\*)\Z")


@dataclass(frozen=True)
class UserAgentRule(Rule):
    """``User-agent`` line opening a group."""

    name: str = field(init=False, default=RuleKind.USER_AGENT.value)
    valid: bool = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "valid", _PRODUCT_TOKEN_RE.match(self.value) is not None)

    @property
    def matches_all(self) -> bool:
        """True for a valid ``*`` token."""
        return self.valid and self.value == "*"


class Match(NamedTuple):
    """Successful path match: matched length in bytes and the rule that matched."""

    length: int
    rule: PathRule


@dataclass(frozen=True)
class PathRule(Rule):
    """``Allow`` or ``Disallow`` line.

    Matching is a prefix match against the normalized path and query of a
    request. Empty and invalid rules never match: an empty ``Disallow``
    historically means "nothing is disallowed".
    """

    valid: bool = field(init=False, repr=False, compare=False)
    pattern: Optional[PathPattern] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.kind not in (RuleKind.ALLOW, RuleKind.DISALLOW):
            raise ValueError(f"Not a path rule name: {self.name!r}")
        valid = is_valid_path_pattern(self.value)
        object.__setattr__(self, "valid", valid)
        object.__setattr__(
            self, "pattern", compile_pattern(self.value) if valid and self.value else None
        )

    @classmethod
    def allow(cls, value: str) -> PathRule:
        return cls(RuleKind.ALLOW.value, value)

    @classmethod
    def disallow(cls, value: str) -> PathRule:
        return cls(RuleKind.DISALLOW.value, value)

    @property
    def allows(self) -> bool:
        return self.kind is RuleKind.ALLOW

    def match(self, path_and_query: str) -> Optional[Match]:
        """Match the rule against a request path and query string.

        Returns ``None`` when the rule does not match, otherwise a
        :class:`Match` with the number of bytes matched in the normalized
        candidate and the rule itself.
        """
        if self.pattern is None:
            return None
        length = match_length(self.pattern, path_and_query)
        if length is None:
            return None
        return Match(length, self)


@dataclass(frozen=True)
class InvalidLine:
    """A non-comment line that can not be parsed as a rule. Kept verbatim."""

    text: str
