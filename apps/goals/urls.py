from django.urls import path
from . import views

urlpatterns = [
    path('project/<uuid:project_id>/', views.goal_create_view, name='goal_create'),
    path('<uuid:pk>/', views.goal_delete_view, name='goal_delete'),
    path('<uuid:pk>/edit/', views.goal_edit_view, name='goal_edit'),
    path('<uuid:pk>/progress/', views.goal_progress_view, name='goal_progress'),
    path('<uuid:pk>/complete/', views.goal_complete_view, name='goal_complete'),
]
