"""
URL configuration for judiciary_project project.

- /auth/     login, logout, token refresh, own profile
- /users/    user management (admin)
- /courts/   circuit and magisterial courts
- /staff/    court staff and employment status
"""
from django.urls import path, include

from judiciary_project.views import health

urlpatterns = [
    path('', health, name='health'),

    # Authentication endpoints (login, logout, tokens, profile, password)
    path('auth/', include('core.user_accounts.auth_urls')),

    # User management endpoints
    path('users/', include('core.user_accounts.urls')),

    # Courts and staff
    path('', include('judiciary.urls')),
]
