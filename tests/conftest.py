from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from otpgate.directory import load_users
from otpgate.server.app import create_app

ALICE_SECRET = "KVSYYQOFAACHZYGG7HIA53SUPXHUT4X2"
SHORT_SECRET = "GEZDGNBVGY3TQOJQ"  # 10 bytes


@pytest.fixture
def users_file(tmp_path):
    path = tmp_path / "users.json"
    path.write_text(
        json.dumps(
            [
                {"email": "alfredo@example.com", "company": "miempresa", "secret": ALICE_SECRET},
                {"email": "short@example.com", "company": "miempresa", "secret": SHORT_SECRET},
                {"email": "broken@example.com", "company": "miempresa", "secret": "not base32!"},
            ]
        )
    )
    return path


@pytest.fixture
def directory(users_file):
    return load_users(users_file)


@pytest.fixture
def client(directory):
    return TestClient(create_app(directory))
