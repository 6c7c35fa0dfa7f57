"""
URL configuration for Courts module.
"""
from django.urls import path
from judiciary.courts import views

app_name = 'courts'

urlpatterns = [
    path('', views.court_list, name='court_list'),
    path('circuit/', views.circuit_court_list, name='circuit_court_list'),
    path('circuit/<int:pk>/magisterial/', views.circuit_magisterial_courts, name='circuit_magisterial_courts'),
    path('magisterial/', views.magisterial_court_list, name='magisterial_court_list'),
    path('<int:pk>/', views.court_detail, name='court_detail'),
]
