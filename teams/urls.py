# teams/urls.py
from django.urls import path

from .views import TeamManagementView

urlpatterns = [
    path("", TeamManagementView.as_view(), name="team-management"),
]
