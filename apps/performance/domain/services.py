# apps/performance/domain/services.py
import logging
from typing import List, Optional

from django.conf import settings
from django.core.exceptions import PermissionDenied, ValidationError
from django.db import transaction
from django.db.models import Max
from django.http import Http404
from django.utils import timezone

from apps.core.api import get_owned_or_404
from apps.core.domain.services import user_timezone
from apps.core.domain.time_functions import get_local_date, get_week_range, get_week_start
from apps.core.domain.welcome_data import DEFAULT_PERFORMANCE_QUESTIONS
from apps.performance.models import PerformanceQuestion, PerformanceResponse

logger = logging.getLogger(__name__)


class QuestionService:

    def list_questions(self, user, include_inactive=False):
        qs = PerformanceQuestion.objects.filter(user=user)
        if not include_inactive:
            qs = qs.filter(is_active=True)
        return qs.order_by('order', 'id')

    def get_question(self, user, question_id) -> PerformanceQuestion:
        return get_owned_or_404(PerformanceQuestion, question_id, user, label="Question")

    def next_order(self, user) -> int:
        current = PerformanceQuestion.objects.filter(user=user).aggregate(m=Max('order'))['m']
        return current + 1 if current is not None else 1

    def create_question(self, user, title, description="", description_html="", description_json="",
                        order=None, is_active=True) -> PerformanceQuestion:
        return PerformanceQuestion.objects.create(
            user=user,
            title=title.strip(),
            description=(description or "").strip(),
            description_html=description_html or "",
            description_json=description_json or "",
            order=order if order is not None else self.next_order(user),
            is_active=True if is_active is None else is_active,
        )

    def update_question(self, user, question_id, **changes) -> PerformanceQuestion:
        question = self.get_question(user, question_id)
        for field, value in changes.items():
            if field in ('title', 'description'):
                value = (value or "").strip()
            setattr(question, field, value)
        question.save()
        return question

    @transaction.atomic
    def delete_question(self, user, question_id) -> dict:
        """Z odpowiedziami -> wyłączenie (soft), bez odpowiedzi -> usunięcie (hard)."""
        question = self.get_question(user, question_id)
        response_count = question.responses.count()

        if response_count > 0:
            question.is_active = False
            question.save(update_fields=['is_active', 'updated_at'])
            logger.info("Question %s deactivated (%d responses)", question.pk, response_count)
            return {'type': 'soft_delete', 'response_count': response_count}

        question.delete()
        return {'type': 'hard_delete', 'response_count': 0}

    def get_disabled_questions(self, user):
        # Ostatnio wyłączone pierwsze
        return PerformanceQuestion.objects.filter(user=user, is_active=False).order_by('-updated_at', '-id')

    @transaction.atomic
    def reorder_questions(self, user, question_ids: List[int]):
        questions = {q.id: q for q in PerformanceQuestion.objects.filter(id__in=question_ids)}
        for pk in question_ids:
            question = questions.get(pk)
            if question is None or question.user_id != user.id:
                raise ValidationError({'ids': ["Invalid question ID or access denied"]})

        now = timezone.now()
        for index, pk in enumerate(question_ids, start=1):
            questions[pk].order = index
            questions[pk].updated_at = now
        PerformanceQuestion.objects.bulk_update(questions.values(), ['order', 'updated_at'])
        return self.list_questions(user, include_inactive=True)

    def seed_default_questions(self, user) -> List[PerformanceQuestion]:
        """Domyślny zestaw pytań dla użytkownika, który nie ma jeszcze żadnych."""
        if PerformanceQuestion.objects.filter(user=user).exists():
            return []
        created = PerformanceQuestion.objects.bulk_create([
            PerformanceQuestion(user=user, title=q['title'], description=q['description'], order=index)
            for index, q in enumerate(DEFAULT_PERFORMANCE_QUESTIONS, start=1)
        ])
        logger.info("Seeded %d default questions for user %s", len(created), user.pk)
        return created


class ResponseService:

    def current_week_start(self, user, now=None):
        return get_week_start(now, user_timezone(user))

    def list_responses(self, user, question_id=None, week_start_date=None):
        qs = PerformanceResponse.objects.filter(user=user)
        if question_id is not None:
            qs = qs.filter(question_id=question_id)
        if week_start_date is not None:
            qs = qs.filter(week_start_date=week_start_date)
        return qs.order_by('-created_at', '-id')

    def get_response(self, user, response_id) -> PerformanceResponse:
        return get_owned_or_404(PerformanceResponse, response_id, user, label="Response")

    def get_weekly_responses(self, user, week_start_date=None, now=None) -> dict:
        week_start = week_start_date or self.current_week_start(user, now)
        responses = PerformanceResponse.objects.filter(user=user, week_start_date=week_start).order_by('-created_at', '-id')
        questions = QuestionService().list_questions(user)
        return {
            'week_start_date': week_start,
            'responses': list(responses),
            'questions': list(questions),
        }

    def _owned_question(self, user, question_id) -> PerformanceQuestion:
        try:
            return get_owned_or_404(PerformanceQuestion, question_id, user, label="Question")
        except (Http404, PermissionDenied):
            raise Http404("Question not found or access denied")

    def create_response(self, user, question_id, response="", response_html="", response_json="",
                        week_start_date=None, now=None) -> PerformanceResponse:
        question = self._owned_question(user, question_id)
        return PerformanceResponse.objects.create(
            user=user,
            question=question,
            week_start_date=week_start_date or self.current_week_start(user, now),
            response=(response or "").strip(),
            response_html=response_html or "",
            response_json=response_json or "",
        )

    def update_response(self, user, response_id, **changes) -> PerformanceResponse:
        response = self.get_response(user, response_id)
        for field, value in changes.items():
            if field == 'response':
                value = (value or "").strip()
            setattr(response, field, value)
        response.save()
        return response

    def delete_response(self, user, response_id):
        self.get_response(user, response_id).delete()

    def get_current_week_info(self, user, now=None) -> dict:
        tz_name = user_timezone(user)
        start, end = get_week_range(now, tz_name)
        return {
            'start_date': start.isoformat(),
            'end_date': end.isoformat(),
            'current_date': get_local_date(now, tz_name).isoformat(),
        }

    def get_response_history(self, user, question_id, limit: Optional[int] = None):
        question = self._owned_question(user, question_id)
        limit = limit or settings.SOJOURNII['RESPONSE_HISTORY_LIMIT']
        return list(question.responses.filter(user=user).order_by('-week_start_date', '-created_at')[:limit])
