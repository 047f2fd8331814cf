# schedule/urls.py
from django.urls import path

from .views import JudgeScheduleView, OrganizerScheduleView

urlpatterns = [
    path("", OrganizerScheduleView.as_view(), name="schedule-organizer"),
    path("judging/", JudgeScheduleView.as_view(), name="schedule-judging"),
]
