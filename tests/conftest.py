import pytest
from fastapi.testclient import TestClient

from main import app
from app.core import config


@pytest.fixture
def data_file(tmp_path, monkeypatch):
    path = tmp_path / "data" / "customers.json"
    monkeypatch.setattr(config.settings, "DATA_FILE", path)
    return path


@pytest.fixture
def client(data_file):
    return TestClient(app)


def make_customer(name="Alice", alias="a1", dob="1990-01-01"):
    return {"name": name, "alias": alias, "dob": dob}
