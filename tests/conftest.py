"""Pytest configuration for the Change Enablement Agent."""

import copy

import pytest
import yaml
from fastapi.testclient import TestClient

from app.main import app
from app.services.change_enablement.policy.loader import (
    DEFAULT_POLICY_PATH,
    load_policy,
)


@pytest.fixture
def client():
    """Test client with the app lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def default_policy():
    return load_policy(DEFAULT_POLICY_PATH)


@pytest.fixture
def policy_copy(default_policy):
    """A mutable deep copy of the bundled policy."""
    return copy.deepcopy(default_policy)


@pytest.fixture
def write_policy(tmp_path):
    """Write a policy dict (or raw text) to a temporary YAML file."""

    def _write(content, name="policy.yaml"):
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(yaml.safe_dump(content, allow_unicode=True), encoding="utf-8")
        return str(path)

    return _write
