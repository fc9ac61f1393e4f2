# sojournii/urls.py
from django.contrib import admin
from django.urls import path, include
from apps.core import views as core_views


urlpatterns = [
    path('admin/', admin.site.urls),
    path('accounts/', include('django.contrib.auth.urls')),
    path('api/dashboard/', core_views.dashboard_view, name='dashboard'),
    # Tutaj podpinamy nasze aplikacje:
    path('api/', include('apps.core.urls')),
    path('api/goals/', include('apps.goals.urls')),
    path('api/timeline/', include('apps.timeline.urls')),
    path('api/tasks/', include('apps.tasks.urls')),
    path('api/notes/', include('apps.notes.urls')),
    path('api/performance/', include('apps.performance.urls')),
    path('api/retros/', include('apps.retros.urls')),
    path('api/work-hours/', include('apps.workhours.urls')),
]
