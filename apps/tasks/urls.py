from django.urls import path
from . import views

urlpatterns = [
    path('', views.task_list_view, name='task_list'),
    path('range/', views.task_range_view, name='task_range'),
    path('<int:pk>/', views.task_detail_view, name='task_detail'),
    path('<int:pk>/complete/', views.task_complete_view, name='task_complete'),
]
