from django.urls import path
from . import views

urlpatterns = [
    path('events/', views.event_list_view, name='calendar_events'),
    path('events/<uuid:pk>/', views.event_delete_view, name='calendar_event_delete'),
]
