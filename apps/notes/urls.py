from django.urls import path
from . import views

urlpatterns = [
    path('', views.note_list_view, name='note_list'),
    path('<int:pk>/', views.note_detail_view, name='note_detail'),
]
