"""Shared fixtures"""
import pytest
from fastapi.testclient import TestClient

from sensor_graph.app import create_app
from sensor_graph.config.settings import Settings


class FakeClock:
    """Clock returning a settable epoch second"""

    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def settings(tmp_path):
    return Settings(
        debug=False,
        port=8000,
        value_count=3,
        value_default=0.0,
        static_dir=tmp_path / "static",
        pkg_dir=tmp_path / "pkg",
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def app(settings, clock):
    return create_app(settings, clock=clock)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
