import pytest

import llm
from app import create_app
from auth import create_access_token
from config import TestingConfig
from models import db, User


class FakeLLM:
    """Stands in for llm.generate_json; replies are queued per test."""

    def __init__(self):
        self.replies = []
        self.prompts = []

    def queue(self, *replies):
        self.replies.extend(replies)

    def __call__(self, prompt, system=None):
        self.prompts.append(prompt)
        if not self.replies:
            raise llm.AIServiceError("No fake reply queued")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def fake_llm(monkeypatch):
    fake = FakeLLM()
    monkeypatch.setattr(llm, "generate_json", fake)
    return fake


@pytest.fixture
def make_user(app):
    def _make_user(email="user@example.com", name="Test User", status="approved",
                   role="user", password="Passw0rd!"):
        user = User(email=email, name=name, status=status, role=role)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        return user
    return _make_user


def auth_header(user):
    return {"Authorization": f"Bearer {create_access_token(user)}"}


@pytest.fixture
def user(make_user):
    return make_user()


@pytest.fixture
def headers(user):
    return auth_header(user)


@pytest.fixture
def admin_headers(make_user):
    admin = make_user(email="admin@example.com", name="Admin", role="admin")
    return auth_header(admin)
