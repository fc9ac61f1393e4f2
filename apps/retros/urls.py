from django.urls import path
from . import views

urlpatterns = [
    path('', views.retro_list_view, name='retro_list'),
    path('current/', views.current_retro_view, name='retro_current'),
    path('week/', views.retro_by_week_view, name='retro_by_week'),
    path('current-week/', views.current_week_info_view, name='retro_current_week'),
    path('<int:pk>/', views.retro_detail_view, name='retro_detail'),
]
