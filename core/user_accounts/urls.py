"""
URL Configuration for user management (admin endpoints).
Authentication endpoints are in auth_urls.py
"""
from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    path('', views.user_list, name='user_list'),
    path('<int:user_id>/', views.user_detail, name='user_detail'),
    path('role/<str:role>/', views.users_by_role, name='users_by_role'),
]
