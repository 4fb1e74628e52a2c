"""Shared fixtures: a fresh application and client per test."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from catalog.core.config import Settings
from catalog.main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(log_level="INFO", rate_limit_enabled=False)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings=settings)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
