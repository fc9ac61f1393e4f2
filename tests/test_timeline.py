from datetime import datetime, timedelta

import pytest
import pytz

from apps.goals.domain.services import GoalService, MilestoneService
from apps.timeline.domain.services import TimelineService, merge_events
from apps.timeline.models import TimelineEvent
from tests.conftest import send

EventType = TimelineEvent.EventType


def make_event(pk, minutes):
    base = pytz.UTC.localize(datetime(2024, 1, 8, 9, 0))
    return TimelineEvent(id=pk, event_type=EventType.GOAL_UPDATED, created_at=base + timedelta(minutes=minutes))


class TestMergeEvents:

    def test_newest_first_across_groups(self):
        goal_events = [make_event(1, 0), make_event(3, 20)]
        milestone_events = [make_event(2, 10), make_event(4, 30)]

        merged = merge_events([goal_events, milestone_events], limit=10)

        assert [e.id for e in merged] == [4, 3, 2, 1]

    def test_ties_broken_by_id(self):
        merged = merge_events([[make_event(1, 0)], [make_event(2, 0)]], limit=10)
        assert [e.id for e in merged] == [2, 1]

    def test_limit(self):
        events = [make_event(i, i) for i in range(1, 6)]
        assert [e.id for e in merge_events([events], limit=2)] == [5, 4]


@pytest.mark.django_db
class TestTimelineService:

    def test_goal_events_include_milestones_only_of_that_goal(self, user):
        goal = GoalService().create_goal(user, name="One")
        other = GoalService().create_goal(user, name="Two")
        MilestoneService().create_milestone(user, goal.id, name="Step")
        MilestoneService().create_milestone(user, other.id, name="Unrelated")

        events = TimelineService().goal_events(user, goal.id)

        assert {e.title for e in events} == {"Created goal: One", "Created milestone: Step"}

    def test_user_goal_update(self, user):
        goal = GoalService().create_goal(user, name="Write")

        event = TimelineService().create_user_goal_update(user, goal.id, title="Wrote 2 chapters")

        assert event.event_type == EventType.USER_GOAL_UPDATE
        assert event.content_label == 'goal'

    def test_create_event_rejects_unknown_type(self, user):
        from django.core.exceptions import ValidationError

        with pytest.raises(ValidationError):
            TimelineService().create_event(user, 'something_else')

    def test_goal_event_rejects_non_goal_type(self, user):
        from django.core.exceptions import ValidationError

        goal = GoalService().create_goal(user, name="Plan")

        with pytest.raises(ValidationError):
            TimelineService().create_goal_event(user, goal.id, EventType.NEW_EMPLOYER)

    def test_user_events_limit(self, user):
        for i in range(5):
            TimelineService.log(user, EventType.NEW_EMPLOYER, title=f"Employer {i}")

        assert len(TimelineService().user_events(user, limit=3)) == 3


@pytest.mark.django_db
class TestTimelineApi:

    def test_post_and_filter(self, api, user):
        goal = GoalService().create_goal(user, name="Plan")
        response = send(api, 'post', '/api/timeline/', {
            'event_type': 'user_goal_update',
            'content_type': 'goal',
            'content_id': str(goal.id),
            'title': "Progress",
        })
        assert response.status_code == 201
        assert response.json()['content_id'] == str(goal.id)

        updates = api.get('/api/timeline/', {'event_type': 'user_goal_update'}).json()
        assert [e['title'] for e in updates] == ["Progress"]

    def test_goal_updates_endpoint(self, api, user):
        goal = GoalService().create_goal(user, name="Plan")

        response = send(api, 'post', f'/api/timeline/goals/{goal.id}/updates/', {'title': "Halfway"})

        assert response.status_code == 201
        events = api.get(f'/api/timeline/goals/{goal.id}/').json()
        assert events[0]['title'] == "Halfway"

    def test_bad_limit(self, api):
        assert api.get('/api/timeline/', {'limit': 'many'}).status_code == 400

    def test_non_positive_limit(self, api):
        assert api.get('/api/timeline/', {'limit': '0'}).status_code == 400

    def test_goal_event_type_restricted(self, api, user):
        goal = GoalService().create_goal(user, name="Plan")
        url = f'/api/timeline/goals/{goal.id}/'

        rejected = send(api, 'post', url, {'event_type': 'joined_sojournii', 'title': "Hi"})
        accepted = send(api, 'post', url, {'event_type': 'goal_updated', 'title': "Renamed"})

        assert rejected.status_code == 400
        assert accepted.status_code == 201
        assert accepted.json()['event_type'] == 'goal_updated'

    def test_only_own_events(self, api, other_user):
        TimelineService.log(other_user, EventType.NEW_EMPLOYER, title="Not yours")
        assert api.get('/api/timeline/').json() == []
