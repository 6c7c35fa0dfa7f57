"""
URL Configuration for Authentication endpoints.
Handles login, logout, token refresh, own profile and password changes.
User management endpoints are in urls.py
"""
from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView
from . import views

app_name = 'auth'

urlpatterns = [
    path('login/', views.login, name='login'),
    path('logout/', views.logout, name='logout'),
    path('me/', views.user_profile, name='user_profile'),
    path('change-password/', views.change_password, name='change_password'),
    path('token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),
]
