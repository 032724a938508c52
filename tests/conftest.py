import pytest

from devopslab import create_app


@pytest.fixture
def app(monkeypatch):
    app = create_app()
    # create_app hands back the shared module app, undo config changes per test
    monkeypatch.setitem(app.config, "TESTING", True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
