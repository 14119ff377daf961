from django.urls import path
from . import views

urlpatterns = [
    path('', views.project_list_view, name='project_list'),
    path('<uuid:pk>/', views.project_detail_view, name='project_detail'),
    path('<uuid:pk>/divide/', views.project_divide_view, name='project_divide'),
    path('<uuid:pk>/save/', views.project_save_view, name='project_save'),
    path('<uuid:pk>/thumbnail/', views.project_thumbnail_view, name='project_thumbnail'),
    path('<uuid:pk>/image/', views.project_image_view, name='project_image'),
]
