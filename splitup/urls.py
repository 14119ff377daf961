# splitup/urls.py
from django.contrib import admin
from django.urls import path, include
from apps.core import views as core_views


urlpatterns = [
    path('admin/', admin.site.urls),
    path('', core_views.dashboard_view, name='home'),
    path('projects/', include('apps.projects.urls')),
    path('goals/', include('apps.goals.urls')),
    path('calendar/', include('apps.calendar_app.urls')),
]
