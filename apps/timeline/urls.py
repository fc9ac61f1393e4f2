# apps/timeline/urls.py
from django.urls import path
from . import views

urlpatterns = [
    path('', views.event_list_view, name='timeline_events'),
    path('goals/<int:goal_pk>/', views.goal_event_list_view, name='goal_timeline_events'),
    path('goals/<int:goal_pk>/updates/', views.user_goal_update_view, name='user_goal_update'),
]
