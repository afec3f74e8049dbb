# File: tests/test_package.py
"""End-to-end behaviour of ``robots_scout.parse``."""
import time

import pytest

import robots_scout
from robots_scout import RobotsTxt, parse


def test_version():
    assert robots_scout.__version__


def test_parse_returns_robots_txt():
    assert isinstance(parse(""), RobotsTxt)
    assert isinstance(parse(b""), RobotsTxt)


def test_robots_txt_is_always_allowed():
    robots = parse("User-agent: *\nDisallow: /\n")
    assert robots.allow("random-agent", "/robots.txt")


@pytest.mark.parametrize(
    "text,agent,path,allowed",
    [
        ("User-agent: *\nAllow: /foo\n", "random-agent", "/foo", True),
        ("User-agent: *\nDisallow: /foo\n", "random-agent", "/foo", False),
        ("User-agent: *\nDisallow: /foo\n", "random-agent", "/bar", True),
        ("User-agent: *\nAllow: /foo\nDisallow: /foo/path\n", "agent", "/foo/path", False),
        ("User-agent: known-agent\nDisallow: /foo\n", "random-agent", "/foo", True),
        ("User-agent: known-agent\nDisallow: /foo\n", "known-agent", "/foo", False),
        # product token contained in the user agent string
        ("User-agent: agent\nDisallow: /bar\n", "agent/1", "/bar", False),
        ("User-agent: agent\nDisallow: /bar\n", "Mozilla/5.0 (compatible; AGENT/2.0)", "/bar", False),
        # "/" is not allowed in a product token, so the group is ignored
        ("User-agent: agent/1\nDisallow: /bar\n", "agent/1.3", "/bar", True),
        ("User-agent: bot2\nDisallow: /bar\n", "bot2/1.0", "/bar", False),
        ("User-agent: *\nDisallow: /foo$\n", "random-agent", "/foo", False),
        ("User-agent: *\nDisallow: /foo$\n", "random-agent", "/foo/bar", True),
        ("User-agent: *\nDisallow: /foo*\nAllow: /foo/bar\n", "random-agent", "/foo/bar/baz", False),
        ("User-agent: *\nDisallow: /foo*\nAllow: /foo/bar\n", "random-agent", "/foo/bar", True),
        ("User-agent: *\nDisallow: /foo?bar=baz\n", "random-agent", "/foo?bar=baz&qux=quux", False),
        ("User-agent: *\nDisallow: /foo-%2a%24\n", "random-agent", "/foo-*$/bar", False),
        (
            "User-agent: *\nDisallow: /їжачки\n",
            "random-agent",
            "/%D1%97%D0%B6%D0%B0%D1%87%D0%BA%D0%B8/bar",
            False,
        ),
        ("User-agent: *\nDisallow: /private\n", "bot", "https://example.com/private/x#top", False),
        ("User-agent: *\nDisallow: /private\n", "bot", "/public/../private", False),
        # a tab is encoded, not dropped
        ("User-agent: *\nDisallow: /private\n", "bot", "/pri\tvate", True),
        # composed and decomposed forms are the same path
        ("User-agent: *\nDisallow: /caf\u00e9\n", "bot", "/cafe\u0301/menu", False),
        ("User-agent: *\nDisallow: /cafe\u0301\n", "bot", "/caf%C3%A9", False),
    ],
)
def test_access(text, agent, path, allowed):
    robots = parse(text)
    assert robots.allow(agent, path) is allowed
    assert robots.disallow(agent, path) is not allowed


def test_most_specific_match_across_groups():
    robots = parse(
        "User-agent: *\nDisallow: /foo\nUser-agent: specific-agent\nAllow: /foo/path\n"
    )
    assert robots.disallow("specific-agent", "/foo/bar")
    assert robots.allow("specific-agent", "/foo/path")


def test_wildcards():
    robots = parse("User-agent: *\nDisallow: /foo*\nDisallow: *.backup\n")
    for path in ["/foo", "/foo/bar", "/foo/bar/baz", "/foobar", "/bar/baz.backup", "/bar.backup/baz"]:
        assert robots.disallow("random-agent", path), path
    assert robots.allow("random-agent", "/bar")


def test_multiple_user_agents():
    robots = parse("User-agent: agent-a\nUser-agent: agent-b\nDisallow: /bar\n")
    assert robots.disallow("agent-a", "/bar")
    assert robots.disallow("agent-b", "/bar")
    assert robots.allow("agent-c", "/bar")


def test_sample_document(sample_text):
    robots = parse(sample_text)
    assert robots.disallow("AnyBot", "/private/data")
    assert robots.allow("AnyBot", "/private/press/2024")
    assert robots.disallow("TestBot/1.0", "/search?q=robots")
    assert robots.allow("TestBot/1.0", "/search")
    assert robots.disallow("otherbot", "/docs/manual.pdf")
    assert robots.allow("otherbot", "/docs/manual.pdf?download=1")


def test_parse_strips_byte_order_mark():
    robots = parse(b"\xef\xbb\xbfAllow: *")
    (rule,) = robots.rules
    assert rule == robots_scout.PathRule.allow("*")


def test_hostile_wildcard_rule_is_evaluated_quickly():
    robots = parse("User-agent: *\nDisallow: /" + "*a" * 12 + "b\n")
    started = time.perf_counter()
    assert robots.allow("bot", "/" + "a" * 40)
    assert robots.disallow("bot", "/" + "a" * 40 + "b")
    assert time.perf_counter() - started < 1.0
