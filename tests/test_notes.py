import pytest

from apps.notes.models import Note
from tests.conftest import send

pytestmark = pytest.mark.django_db


def test_create_and_list(api):
    response = send(api, 'post', '/api/notes/', {'title': "Ideas", 'content': "Try pytest"})
    assert response.status_code == 201

    notes = api.get('/api/notes/').json()
    assert [n['title'] for n in notes] == ["Ideas"]


def test_partial_update_keeps_other_fields(api, user):
    note = Note.objects.create(user=user, title="Draft", content="Body")

    response = send(api, 'patch', f'/api/notes/{note.id}/', {'title': "Final"})

    assert response.json()['title'] == "Final"
    assert response.json()['content'] == "Body"


def test_owner_comes_from_session(api, user, other_user):
    send(api, 'post', '/api/notes/', {'title': "Mine", 'user': other_user.id})
    assert Note.objects.get().user == user


def test_delete(api, user):
    note = Note.objects.create(user=user, title="Old")
    assert api.delete(f'/api/notes/{note.id}/').status_code == 204
    assert not Note.objects.exists()
