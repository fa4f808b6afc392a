import pytest

from cashcompass import create_app
from cashcompass.config import TestConfig
from cashcompass.extensions import db


@pytest.fixture
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def register(client, username="alice", email="alice@example.com", password="s3cret"):
    res = client.post("/api/auth/register", json={"username": username, "email": email, "password": password})
    assert res.status_code == 200, res.get_json()
    return res.get_json()


@pytest.fixture
def auth_headers(client):
    token = register(client)["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_headers(client):
    token = register(client, username="bob", email="bob@example.com")["token"]
    return {"Authorization": f"Bearer {token}"}
