from django.urls import path
from . import views

urlpatterns = [
    path('', views.goal_list_view, name='goal_list'),
    path('<int:pk>/', views.goal_detail_view, name='goal_detail'),
    path('<int:pk>/timeline/', views.goal_timeline_view, name='goal_timeline'),
    path('<int:pk>/milestones/', views.goal_milestones_view, name='goal_milestones'),
    path('<int:pk>/milestones/reorder/', views.milestone_reorder_view, name='milestone_reorder'),

    path('milestones/', views.milestone_list_view, name='milestone_list'),
    path('milestones/<int:pk>/', views.milestone_detail_view, name='milestone_detail'),
]
