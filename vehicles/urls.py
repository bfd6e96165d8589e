from django.urls import path
from . import views

urlpatterns = [
    path("", views.vehicle_dashboard_view, name="vehicle_dashboard"),
    path("api/dashboard/", views.vehicle_dashboard_data, name="vehicle_dashboard_data"),
]
