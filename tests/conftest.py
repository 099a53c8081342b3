import pytest

from qr_generator.app import create_app


@pytest.fixture()
def app():
    return create_app({"TESTING": True, "LOG_JSON": False})


@pytest.fixture()
def client(app):
    return app.test_client()
