from datetime import timedelta

from django.contrib.auth import get_user_model
from django.test import override_settings
from django.urls import reverse
from django.utils import timezone

from rest_framework import status
from rest_framework.test import APIClient, APITestCase

from schedule.models import ScheduleAssignment
from schedule.services import chronological, load_assignments, past_cutoff_index, replace_schedule

User = get_user_model()


def session(time, room, team, **extra):
    return {
        "time": time,
        "room": room,
        "team_id": f"id-{team}",
        "team_name": team,
        "devpost": f"https://devpost.com/software/{team.lower()}",
        "member_names": [f"{team} hacker"],
        "judges": [{"id": "j1", "name": "Grace"}],
        **extra,
    }


@override_settings(SCHEDULE_ROOM_COUNT=2, SCHEDULE_ROOM_URL_TEMPLATE="https://rooms.example/{number}")
class OrganizerScheduleApiTests(APITestCase):
    def setUp(self):
        self.client = APIClient()
        self.url = reverse("schedule-organizer")

        self.organizer = User.objects.create_user(username="org", password="pass1234", role=User.ROLE_ORGANIZER)
        self.judge = User.objects.create_user(username="judge", password="pass1234", role=User.ROLE_JUDGE)

    def test_judge_cannot_view_organizer_grid(self):
        self.client.force_authenticate(user=self.judge)

        resp = self.client.get(self.url)

        self.assertEqual(resp.status_code, status.HTTP_403_FORBIDDEN, resp.content)

    def test_import_then_grid(self):
        self.client.force_authenticate(user=self.organizer)
        payload = [
            session("2026-03-01T09:00:00Z", "room-1", "A"),
            session("2026-03-01T09:00:00Z", "room-2", "B"),
            session("2026-03-01T10:00:00Z", "room-1", "C"),
        ]

        resp = self.client.put(self.url, payload, format="json")

        self.assertEqual(resp.status_code, status.HTTP_200_OK, resp.content)
        self.assertEqual(ScheduleAssignment.objects.count(), 3)
        self.assertEqual(
            resp.data["rooms"],
            [
                {"id": "room-1", "label": "Room 1", "url": "https://rooms.example/1"},
                {"id": "room-2", "label": "Room 2", "url": "https://rooms.example/2"},
            ],
        )

        rows = self.client.get(self.url).data["rows"]
        self.assertEqual([row["time"] for row in rows], ["2026-03-01T09:00:00Z", "2026-03-01T10:00:00Z"])
        self.assertEqual(rows[0]["room-1"]["team_name"], "A")
        self.assertEqual(rows[0]["room-2"]["team_name"], "B")
        self.assertEqual(rows[1]["room-1"]["team_name"], "C")
        self.assertIsNone(rows[1]["room-2"])
        # Missing room_url falls back to the configured room
        self.assertEqual(rows[0]["room-1"]["room_url"], "https://rooms.example/1")

    def test_import_replaces_previous_schedule(self):
        replace_schedule([session("2026-03-01T09:00:00Z", "room-1", "Old")])
        self.client.force_authenticate(user=self.organizer)

        resp = self.client.put(self.url, [session("2026-03-01T11:00:00Z", "room-2", "New")], format="json")

        self.assertEqual(resp.status_code, status.HTTP_200_OK, resp.content)
        self.assertEqual(list(ScheduleAssignment.objects.values_list("team_name", flat=True)), ["New"])

    def test_import_rejects_unknown_room_and_bad_time(self):
        self.client.force_authenticate(user=self.organizer)

        resp = self.client.put(
            self.url,
            [
                session("2026-03-01T09:00:00Z", "room-7", "A"),
                session("nine o'clock", "room-1", "B"),
            ],
            format="json",
        )

        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST, resp.content)
        self.assertIn("room", resp.data["errors"][0])
        self.assertIn("time", resp.data["errors"][1])
        self.assertFalse(ScheduleAssignment.objects.exists())


class JudgeScheduleApiTests(APITestCase):
    def setUp(self):
        self.client = APIClient()
        self.url = reverse("schedule-judging")

        self.judge = User.objects.create_user(username="judge", password="pass1234", role=User.ROLE_JUDGE)
        self.client.force_authenticate(user=self.judge)

        start = timezone.now().replace(microsecond=0)
        # Imported out of order on purpose
        replace_schedule([
            session((start + timedelta(minutes=30)).isoformat(), "room-1", "Upcoming"),
            session((start - timedelta(minutes=60)).isoformat(), "room-1", "Earliest"),
            session((start - timedelta(minutes=20)).isoformat(), "room-2", "Earlier"),
        ])

    def test_past_sessions_hidden_by_default(self):
        resp = self.client.get(self.url)

        self.assertEqual(resp.status_code, status.HTTP_200_OK, resp.content)
        self.assertEqual(resp.data["cutoff_index"], 2)
        self.assertFalse(resp.data["show_past"])
        self.assertEqual([row["project"]["name"] for row in resp.data["results"]], ["Upcoming"])

        row = resp.data["results"][0]
        self.assertEqual(row["project"]["link"], "https://devpost.com/software/upcoming")
        self.assertEqual(row["team_members"], ["Upcoming hacker"])
        self.assertEqual(row["judges"], ["Grace"])
        self.assertEqual(row["form"], "/judging?id=id-Upcoming")
        self.assertEqual(row["room"], "https://vhl.ink/room-1")

    def test_show_past_lists_everything_chronologically(self):
        resp = self.client.get(self.url, {"show_past": "true"})

        self.assertEqual(resp.status_code, status.HTTP_200_OK, resp.content)
        self.assertEqual(
            [row["project"]["name"] for row in resp.data["results"]],
            ["Earliest", "Earlier", "Upcoming"],
        )

    def test_hackers_can_view_judging_schedule(self):
        hacker = User.objects.create_user(username="hacker", password="pass1234")
        self.client.force_authenticate(user=hacker)

        resp = self.client.get(self.url)

        self.assertEqual(resp.status_code, status.HTTP_200_OK, resp.content)

    def test_cutoff_helpers(self):
        assignments = chronological(load_assignments())

        self.assertEqual([a.team_name for a in assignments], ["Earliest", "Earlier", "Upcoming"])
        self.assertEqual(past_cutoff_index(assignments, timezone.now()), 2)
        self.assertEqual(past_cutoff_index(assignments, timezone.now() - timedelta(days=1)), 0)
        self.assertEqual(past_cutoff_index(assignments, timezone.now() + timedelta(days=1)), 3)
