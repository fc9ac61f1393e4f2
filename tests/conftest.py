import json

import pytest
from django.contrib.auth.models import User


@pytest.fixture(autouse=True)
def _locmem_email(settings):
    settings.EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'


@pytest.fixture
def user(db):
    return User.objects.create_user(username='ada', email='ada@example.com', password='secret-pass')


@pytest.fixture
def other_user(db):
    return User.objects.create_user(username='bob', email='bob@example.com', password='secret-pass')


@pytest.fixture
def api(client, user):
    """Klient testowy zalogowany jako `user`."""
    client.force_login(user)
    return client


def send(client, method, url, payload=None):
    """Żądanie z ciałem JSON (POST/PATCH)."""
    body = json.dumps(payload) if payload is not None else ''
    return getattr(client, method)(url, data=body, content_type='application/json')
