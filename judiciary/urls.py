"""
Judiciary - Main URL Configuration
Routes URLs to the court and staff sub-apps.
"""
from django.urls import path, include

urlpatterns = [
    path('courts/', include('judiciary.courts.urls')),
    path('staff/', include('judiciary.staff.urls')),
]
