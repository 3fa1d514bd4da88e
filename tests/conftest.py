import pytest
from flask import template_rendered

from opencall import create_app
from opencall.config import TestConfig


@pytest.fixture()
def app():
    return create_app(TestConfig)


@pytest.fixture()
def app_context(app):
    with app.app_context():
        yield


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def captured_templates(app):
    """Record (template name, context) for every render."""
    recorded = []

    def record(sender, template, context, **extra):
        recorded.append((template.name, context))

    template_rendered.connect(record, app)
    yield recorded
    template_rendered.disconnect(record, app)


@pytest.fixture()
def registered_user(client):
    data = {'email': 'a@b.com', 'password': 'p', 'firstName': 'A', 'lastName': 'B'}
    r = client.post('/register', data=data)
    assert r.status_code == 302
    return data

