# vehicles/admin.py
from django.contrib import admin
from .models import Vehicle

@admin.register(Vehicle)
class VehicleAdmin(admin.ModelAdmin):
    list_display = ("id","model","year","color","status","plant","assembly_line","created_at")
    search_fields = ("id","model","vin","plant","assembly_line")
    list_filter = ("status","plant","year","color")
