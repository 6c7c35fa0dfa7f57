"""
URL configuration for Staff module.
"""
from django.urls import path
from judiciary.staff import views

app_name = 'staff'

urlpatterns = [
    path('', views.staff_list, name='staff_list'),
    path('statistics/', views.staff_statistics, name='staff_statistics'),
    path('status/<str:employment_status>/', views.staff_by_status, name='staff_by_status'),
    path('court/<int:court_id>/', views.staff_by_court, name='staff_by_court'),
    path('<int:pk>/', views.staff_detail, name='staff_detail'),
    path('<int:pk>/employment-status/', views.staff_employment_status, name='staff_employment_status'),
]
