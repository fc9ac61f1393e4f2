from datetime import date

import pytest

from apps.workhours.domain.services import WorkHourService, compute_work_time
from apps.workhours.models import WorkHourEntry
from tests.conftest import send

NINE_TO_FIVE = {
    'work_start_hour': 9, 'work_start_minute': 0, 'work_start_am_pm': 'AM',
    'work_end_hour': 5, 'work_end_minute': 0, 'work_end_am_pm': 'PM',
}


class TestComputeWorkTime:

    def test_single_location_minus_break(self):
        values = dict(NINE_TO_FIVE, work_location='office', break_minutes=30)
        assert compute_work_time(values) == (7, 30)

    def test_incomplete_times(self):
        assert compute_work_time({'work_start_hour': 9, 'work_location': 'home'}) == (0, 0)

    def test_hybrid_sums_both_spans(self):
        values = {
            'work_location': 'hybrid',
            'work_home_start_hour': 8, 'work_home_start_minute': 0, 'work_home_start_am_pm': 'AM',
            'work_home_end_hour': 11, 'work_home_end_minute': 0, 'work_home_end_am_pm': 'AM',
            'work_office_start_hour': 12, 'work_office_start_minute': 30, 'work_office_start_am_pm': 'PM',
            'work_office_end_hour': 4, 'work_office_end_minute': 45, 'work_office_end_am_pm': 'PM',
            'break_hours': 1,
        }
        assert compute_work_time(values) == (6, 15)

    def test_hybrid_with_one_span(self):
        values = {
            'work_location': 'hybrid',
            'work_home_start_hour': 9, 'work_home_start_minute': 0, 'work_home_start_am_pm': 'AM',
            'work_home_end_hour': 10, 'work_home_end_minute': 0, 'work_home_end_am_pm': 'AM',
        }
        assert compute_work_time(values) == (1, 0)

    def test_break_longer_than_work(self):
        values = dict(NINE_TO_FIVE, break_hours=10)
        assert compute_work_time(values) == (0, 0)


@pytest.mark.django_db
class TestWorkHourService:

    def test_upsert_replaces_entry_for_same_day(self, user):
        service = WorkHourService()
        service.upsert_work_hour_entry(user, date(2024, 1, 8), notes="first", **NINE_TO_FIVE)
        entry = service.upsert_work_hour_entry(user, date(2024, 1, 8), work_location='home')

        assert WorkHourEntry.objects.count() == 1
        assert (entry.work_hours, entry.work_minutes) == (0, 0)
        assert entry.notes == ""
        assert entry.work_start_hour is None

    def test_date_range(self, user):
        service = WorkHourService()
        for day in (date(2024, 1, 7), date(2024, 1, 8), date(2024, 1, 14), date(2024, 1, 15)):
            service.upsert_work_hour_entry(user, day, **NINE_TO_FIVE)

        entries = service.get_work_hours_by_date_range(user, date(2024, 1, 8), date(2024, 1, 14))

        assert [e.date for e in entries] == [date(2024, 1, 8), date(2024, 1, 14)]

    def test_delete_checks_owner(self, user, other_user):
        from django.core.exceptions import PermissionDenied

        entry = WorkHourService().upsert_work_hour_entry(user, date(2024, 1, 8))
        with pytest.raises(PermissionDenied):
            WorkHourService().delete_work_hour_entry(other_user, entry.id)


@pytest.mark.django_db
class TestWorkHourApi:

    def test_upsert_and_get_by_day(self, api):
        response = send(api, 'post', '/api/work-hours/', dict(NINE_TO_FIVE, date='2024-01-08', break_hours=1))
        assert response.status_code == 200
        assert (response.json()['work_hours'], response.json()['work_minutes']) == (7, 0)

        day = api.get('/api/work-hours/day/', {'date': '2024-01-08'}).json()
        assert day['work_start_am_pm'] == 'AM'
        assert api.get('/api/work-hours/day/', {'date': '2024-01-09'}).json() is None

    def test_range_requires_dates(self, api):
        assert api.get('/api/work-hours/').status_code == 400
        assert api.get('/api/work-hours/', {'start': '2024-01-14', 'end': '2024-01-08'}).status_code == 400

    def test_invalid_hour(self, api):
        response = send(api, 'post', '/api/work-hours/', dict(NINE_TO_FIVE, date='2024-01-08', work_start_hour=13))
        assert response.status_code == 400

    def test_delete_foreign_entry(self, api, other_user):
        entry = WorkHourService().upsert_work_hour_entry(other_user, date(2024, 1, 8))
        assert api.delete(f'/api/work-hours/{entry.id}/').status_code == 403
        assert api.delete('/api/work-hours/999999/').status_code == 404
