"""Pytania oceny i cotygodniowe odpowiedzi."""
from datetime import date, datetime

import pytest
import pytz
from django.core.exceptions import ValidationError
from django.http import Http404

from apps.core.domain.welcome_data import DEFAULT_PERFORMANCE_QUESTIONS
from apps.core.models import AccountSettings
from apps.performance.domain.services import QuestionService, ResponseService
from apps.performance.models import PerformanceQuestion, PerformanceResponse
from tests.conftest import send

pytestmark = pytest.mark.django_db

WEEK = date(2024, 1, 8)


@pytest.fixture
def questions(user):
    service = QuestionService()
    return [service.create_question(user, title=title) for title in ("Impact?", "Growth?", "Blockers?")]


class TestQuestionService:

    def test_orders_are_appended(self, questions):
        assert [q.order for q in questions] == [1, 2, 3]

    def test_delete_without_responses_is_hard(self, user, questions):
        result = QuestionService().delete_question(user, questions[0].id)

        assert result == {'type': 'hard_delete', 'response_count': 0}
        assert not PerformanceQuestion.objects.filter(id=questions[0].id).exists()

    def test_delete_with_responses_is_soft(self, user, questions):
        ResponseService().create_response(user, questions[0].id, "Shipped the API", week_start_date=WEEK)

        result = QuestionService().delete_question(user, questions[0].id)

        assert result == {'type': 'soft_delete', 'response_count': 1}
        question = PerformanceQuestion.objects.get(id=questions[0].id)
        assert not question.is_active
        assert list(QuestionService().get_disabled_questions(user)) == [question]
        assert question not in QuestionService().list_questions(user)

    def test_reorder(self, user, questions):
        a, b, c = questions
        result = QuestionService().reorder_questions(user, [c.id, a.id, b.id])
        assert [(q.title, q.order) for q in result] == [("Blockers?", 1), ("Impact?", 2), ("Growth?", 3)]

    def test_reorder_rejects_foreign_question(self, user, other_user, questions):
        foreign = QuestionService().create_question(other_user, title="Not yours")

        with pytest.raises(ValidationError):
            QuestionService().reorder_questions(user, [questions[0].id, foreign.id])

    def test_seed_only_for_users_without_questions(self, user, other_user, questions):
        assert QuestionService().seed_default_questions(user) == []

        seeded = QuestionService().seed_default_questions(other_user)
        assert [q.title for q in seeded] == [q['title'] for q in DEFAULT_PERFORMANCE_QUESTIONS]


class TestResponseService:

    def test_response_to_foreign_question(self, other_user, questions):
        with pytest.raises(Http404, match="Question not found or access denied"):
            ResponseService().create_response(other_user, questions[0].id, "Sneaky")

    def test_week_defaults_to_users_timezone(self, user, questions):
        AccountSettings.objects.create(user=user, weekly_reminder_time_zone='America/New_York')
        # Poniedziałek 03:00 UTC = niedziela wieczór w Nowym Jorku
        now = pytz.UTC.localize(datetime(2024, 1, 15, 3, 0))

        response = ResponseService().create_response(user, questions[0].id, "Late entry", now=now)

        assert response.week_start_date == WEEK

    def test_weekly_responses(self, user, questions):
        service = ResponseService()
        service.create_response(user, questions[0].id, "This week", week_start_date=WEEK)
        service.create_response(user, questions[1].id, "Other week", week_start_date=date(2024, 1, 1))

        weekly = service.get_weekly_responses(user, WEEK)

        assert weekly['week_start_date'] == WEEK
        assert [r.response for r in weekly['responses']] == ["This week"]
        assert len(weekly['questions']) == 3

    def test_history_newest_week_first(self, user, questions):
        service = ResponseService()
        for day in (date(2024, 1, 1), date(2024, 1, 15), date(2024, 1, 8)):
            service.create_response(user, questions[0].id, f"Week of {day}", week_start_date=day)

        history = service.get_response_history(user, questions[0].id, limit=2)

        assert [r.week_start_date for r in history] == [date(2024, 1, 15), date(2024, 1, 8)]

    def test_current_week_info(self, user):
        now = pytz.UTC.localize(datetime(2024, 1, 10, 12, 0))
        assert ResponseService().get_current_week_info(user, now=now) == {
            'start_date': '2024-01-08',
            'end_date': '2024-01-14',
            'current_date': '2024-01-10',
        }


class TestPerformanceApi:

    def test_question_crud(self, api):
        created = send(api, 'post', '/api/performance/questions/', {'title': "What went well?"})
        assert created.status_code == 201
        question_id = created.json()['id']

        updated = send(api, 'patch', f'/api/performance/questions/{question_id}/', {'title': "  Wins?  "})
        assert updated.json()['title'] == "Wins?"

        deleted = api.delete(f'/api/performance/questions/{question_id}/')
        assert deleted.json()['type'] == 'hard_delete'

    def test_include_inactive(self, api, user, questions):
        questions[0].is_active = False
        questions[0].save()

        active = api.get('/api/performance/questions/').json()
        everything = api.get('/api/performance/questions/', {'include_inactive': 'true'}).json()

        assert len(active) == 2
        assert len(everything) == 3

    def test_reorder_endpoint_with_foreign_id(self, api, other_user, questions):
        foreign = QuestionService().create_question(other_user, title="Theirs")

        response = send(api, 'post', '/api/performance/questions/reorder/', {'ids': [foreign.id]})

        assert response.status_code == 400

    def test_responses_and_weekly(self, api, questions):
        created = send(api, 'post', '/api/performance/responses/', {
            'question_id': questions[0].id,
            'response': "Closed 12 tickets",
            'week_start_date': '2024-01-08',
        })
        assert created.status_code == 201

        weekly = api.get('/api/performance/responses/weekly/', {'week_start_date': '2024-01-08'}).json()
        assert weekly['week_start_date'] == '2024-01-08'
        assert [r['response'] for r in weekly['responses']] == ["Closed 12 tickets"]

        filtered = api.get('/api/performance/responses/', {'question_id': questions[1].id}).json()
        assert filtered == []

    def test_history_endpoint(self, api, questions):
        ResponseService().create_response(questions[0].user, questions[0].id, "Good", week_start_date=WEEK)

        history = api.get(f'/api/performance/questions/{questions[0].id}/history/').json()

        assert [r['response'] for r in history] == ["Good"]

    def test_delete_response(self, api, user, questions):
        response = ResponseService().create_response(user, questions[0].id, "Oops", week_start_date=WEEK)

        assert api.delete(f'/api/performance/responses/{response.id}/').status_code == 204
        assert not PerformanceResponse.objects.exists()
