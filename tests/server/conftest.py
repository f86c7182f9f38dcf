"""
Fixtures shared by all server tests.

Every test runs against the built-in extension table; a ~/.filesort.config
on the test machine must not leak into API results.
"""
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from filesort.registry import EXTENSION_CATEGORIES
from server.main import app

REFERENCE_NAMES = [
    "report.docx", "photo.JPG", "song.mp3", "clip.mp4", "data.zip", "main.cpp", "notes",
]


@pytest.fixture(autouse=True)
def builtin_registry():
    with patch("server.main.get_registry", return_value=EXTENSION_CATEGORIES):
        yield


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
