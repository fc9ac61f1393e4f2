from django.urls import path
from . import views

urlpatterns = [
    path('', views.work_hour_list_view, name='work_hour_list'),
    path('day/', views.work_hour_day_view, name='work_hour_day'),
    path('<int:pk>/', views.work_hour_detail_view, name='work_hour_detail'),
]
