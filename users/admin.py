from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from .models import User

@admin.register(User)
class CustomUserAdmin(UserAdmin):
    list_display = ('username', 'name', 'email', 'role', 'is_staff')
    list_filter = ('role', 'is_staff', 'is_superuser', 'is_active')
    search_fields = ('username', 'name', 'email', 'first_name', 'last_name')
    fieldsets = UserAdmin.fieldsets + (
        ('Hackathon', {'fields': ('role', 'name')}),
    )
    add_fieldsets = UserAdmin.add_fieldsets + (
        ('Hackathon', {'fields': ('role', 'name')}),
    )
