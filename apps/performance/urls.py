from django.urls import path
from . import views

urlpatterns = [
    path('questions/', views.question_list_view, name='question_list'),
    path('questions/disabled/', views.disabled_questions_view, name='question_disabled'),
    path('questions/reorder/', views.question_reorder_view, name='question_reorder'),
    path('questions/<int:pk>/', views.question_detail_view, name='question_detail'),
    path('questions/<int:question_pk>/history/', views.response_history_view, name='response_history'),

    path('responses/', views.response_list_view, name='response_list'),
    path('responses/weekly/', views.weekly_responses_view, name='weekly_responses'),
    path('responses/current-week/', views.current_week_view, name='response_current_week'),
    path('responses/<int:pk>/', views.response_detail_view, name='response_detail'),
]
