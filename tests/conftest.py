# File: tests/conftest.py
from pathlib import Path

import pytest

from robots_scout.config import RobotsConfig

SAMPLE_ROBOTS = """\
# robots.txt for example.com
User-agent: *
Disallow: /private
Allow: /private/press

User-agent: TestBot
User-agent: OtherBot
Disallow: /search?q=*
Disallow: /*.pdf$

Sitemap: https://example.com/sitemap.xml
"""


@pytest.fixture()
def sample_text() -> str:
    """Small but realistic robots.txt content."""
    return SAMPLE_ROBOTS


@pytest.fixture()
def robots_file(tmp_path) -> Path:
    """Write the sample robots.txt to a temporary file."""
    path = tmp_path / "robots.txt"
    path.write_text(SAMPLE_ROBOTS, encoding="utf-8")
    return path


@pytest.fixture()
def basic_config() -> RobotsConfig:
    """Return a basic valid RobotsConfig."""
    return RobotsConfig(user_agent="TestBot/1.0", min_confidence=0.5)
