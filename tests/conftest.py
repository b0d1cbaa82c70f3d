import pytest

from reidentify import create_app
from reidentify.config import TestingConfig
from reidentify.extensions import db


def make_app(tmp_path, store=None, **overrides):
    """Build an app on a throw-away SQLite file with config overrides."""

    class C(TestingConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'test.db'}"

    for k, v in overrides.items():
        setattr(C, k, v)

    return create_app(C, store=store)


@pytest.fixture()
def app(tmp_path):
    a = make_app(tmp_path)
    yield a
    with a.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def db_session(app):
    with app.app_context():
        yield db.session


@pytest.fixture()
def store(app, db_session):
    return app.extensions["document_store"]


def add_pending(store, **fields):
    """Insert one pending request and return its id."""
    with store.transaction():
        return store.insert("pending", fields)
