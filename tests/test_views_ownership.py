"""Wspólne zachowanie API: logowanie, własność rekordów, metody, błędne ciała."""
import pytest

from apps.goals.domain.services import GoalService, MilestoneService
from apps.notes.models import Note
from apps.performance.domain.services import QuestionService
from apps.tasks.models import Task
from tests.conftest import send

pytestmark = pytest.mark.django_db


@pytest.fixture
def foreign(other_user):
    goal = GoalService().create_goal(other_user, name="Secret plan")
    return {
        'goal': goal,
        'milestone': MilestoneService().create_milestone(other_user, goal.id, name="Step one"),
        'task': Task.objects.create(user=other_user, title="Private"),
        'note': Note.objects.create(user=other_user, title="Diary"),
        'question': QuestionService().create_question(other_user, title="Hidden?"),
    }


def test_anonymous_is_redirected_to_login(client):
    response = client.get('/api/goals/')
    assert response.status_code == 302
    assert '/accounts/login/' in response['Location']


@pytest.mark.parametrize("url", [
    '/api/goals/{goal}/',
    '/api/goals/{goal}/milestones/',
    '/api/goals/{goal}/timeline/',
    '/api/goals/milestones/{milestone}/',
    '/api/tasks/{task}/',
    '/api/notes/{note}/',
    '/api/performance/questions/{question}/',
    '/api/timeline/goals/{goal}/',
])
def test_foreign_records_are_forbidden(api, foreign, url):
    ids = {name: obj.id for name, obj in foreign.items()}
    response = api.get(url.format(**ids))

    assert response.status_code == 403
    assert response.json() == {'error': 'Access denied'}


def test_foreign_records_cannot_be_changed(api, foreign):
    goal = foreign['goal']

    assert send(api, 'patch', f'/api/goals/{goal.id}/', {'name': "Mine now"}).status_code == 403
    assert api.delete(f'/api/notes/{foreign["note"].id}/').status_code == 403
    goal.refresh_from_db()
    assert goal.name == "Secret plan"


@pytest.mark.parametrize("url, message", [
    ('/api/goals/999999/', "Goal not found"),
    ('/api/goals/milestones/999999/', "Milestone not found"),
    ('/api/tasks/999999/', "Task not found"),
    ('/api/performance/questions/999999/', "Question not found"),
])
def test_missing_records(api, url, message):
    response = api.get(url)
    assert response.status_code == 404
    assert response.json() == {'error': message}


def test_method_not_allowed(api):
    assert api.put('/api/goals/').status_code == 405
    assert api.get('/api/account-settings/notifications/enable/').status_code == 405


def test_malformed_json(api):
    response = api.post('/api/goals/', data='{"name": ', content_type='application/json')
    assert response.status_code == 400


def test_json_array_body(api):
    response = api.post('/api/notes/', data='[1, 2]', content_type='application/json')
    assert response.status_code == 400
