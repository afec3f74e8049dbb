# setup.py
from setuptools import setup, find_packages

setup(
    name="robots-scout",
    version="0.1.0",
    description="Парсер robots.txt и проверка доступа по RFC 9309",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[
        "chardet>=5.0",
        "click>=8.1",
        "pydantic>=2.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["robots-scout=robots_scout.cli:cli"],
    },
    python_requires=">=3.11",
)
