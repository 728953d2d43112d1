"""Pytest bootstrap configuration.

Settings are read at import time, so pin the environment before any
application module is imported.
"""
import os

import pytest

os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("GRPC__HOST", "127.0.0.1")

from domain.order import Catalog  # noqa: E402


FRUITS = [
    "banana",
    "apple",
    "orange",
    "grape",
    "red apple",
    "kiwi",
    "mango",
    "pear",
    "cherry",
    "green apple",
]


@pytest.fixture
def catalog() -> Catalog:
    return Catalog(FRUITS)
