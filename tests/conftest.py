"""Shared pytest fixtures: a fresh store and app per test."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from taskapi.main import create_app
from taskapi.store import TaskStore


@pytest.fixture
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture
def app(store: TaskStore) -> FastAPI:
    return create_app(store=store)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
