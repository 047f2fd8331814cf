from datetime import timedelta

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.utils import timezone

from schedule.rooms import configured_rooms
from schedule.services import replace_schedule
from teams.services import TeamLifecycleService
from users.identity import Caller

User = get_user_model()

DEMO_PASSWORD = "password"


class Command(BaseCommand):
    help = "Seeds the database with demo hackers, judges, teams and a judging schedule"

    def add_arguments(self, parser):
        parser.add_argument("--slot-minutes", type=int, default=10, help="Length of each judging slot")

    def handle(self, *args, **options):
        self.stdout.write("🌱 Seeding data...")

        # 1. Ensure Users
        admin = self._user("admin", User.ROLE_ORGANIZER, "Ada Organizer", is_staff=True, is_superuser=True)
        judges = [
            self._user("judge1", User.ROLE_JUDGE, "Grace Judge"),
            self._user("judge2", User.ROLE_JUDGE, "Linus Judge"),
        ]
        hackers = [
            self._user(f"hacker{n}", User.ROLE_HACKER, f"Hacker {n}")
            for n in range(1, 7)
        ]
        self.stdout.write(f"Users ready: organizer={admin.username}, judges={len(judges)}, hackers={len(hackers)}")

        # 2. Teams of two, formed through the lifecycle service
        service = TeamLifecycleService()
        teams = []
        for index in range(0, len(hackers), 2):
            leader, teammate = hackers[index], hackers[index + 1]
            team = service.get_my_team(Caller.from_user(leader))
            if team is None:
                team = service.create_team(
                    Caller.from_user(leader),
                    f"Team {index // 2 + 1}",
                    f"https://devpost.com/software/demo-{index // 2 + 1}",
                )
                team = service.join_team(Caller.from_user(teammate), team.join_code)
                self.stdout.write(f"Created Team: {team.name} ({team.join_code})")
            teams.append(team)

        # 3. Schedule: one slot per team, rotating through the rooms
        rooms = configured_rooms()
        start = timezone.now().replace(second=0, microsecond=0) + timedelta(minutes=30)
        rows = []
        for index, team in enumerate(teams):
            room = rooms[index % len(rooms)]
            slot = start + timedelta(minutes=options["slot_minutes"] * (index // len(rooms)))
            rows.append({
                "time": slot.isoformat(),
                "room": room.id,
                "room_url": room.url,
                "team_id": str(team.id),
                "team_name": team.name,
                "devpost": team.devpost,
                "member_names": [member.name for member in team.members],
                "judges": [{"id": str(judge.id), "name": judge.display_name} for judge in judges],
            })
        replace_schedule(rows)

        self.stdout.write(self.style.SUCCESS(f"✅ Seeding Complete! {len(rows)} sessions scheduled."))

    def _user(self, username, role, name, **extra):
        user, created = User.objects.get_or_create(
            username=username,
            defaults={"role": role, "name": name, "email": f"{username}@example.com", **extra},
        )
        if created:
            user.set_password(DEMO_PASSWORD)
            user.save()
        return user
