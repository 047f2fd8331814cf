from datetime import timezone as dt_timezone, timedelta

from django.test import SimpleTestCase

from schedule.reconciler import build_judge_schedule, build_organizer_grid
from schedule.records import Assignment, Judge
from schedule.rooms import build_rooms


def assignment(time, room, team, **extra):
    return Assignment(
        time=time,
        room=room,
        team_id=f"id-{team}",
        team_name=team,
        devpost=extra.pop("devpost", f"https://devpost.com/software/{team.lower()}"),
        member_names=extra.pop("member_names", (f"{team} hacker",)),
        judges=extra.pop("judges", (Judge(id="j1", name="Grace"),)),
        room_url=extra.pop("room_url", f"https://vhl.ink/{room}"),
    )


class OrganizerGridTests(SimpleTestCase):
    def setUp(self):
        self.two_rooms = build_rooms(2)
        self.four_rooms = build_rooms(4)

    def test_rooms_from_count(self):
        self.assertEqual([r.id for r in self.four_rooms], ["room-1", "room-2", "room-3", "room-4"])
        self.assertEqual(self.four_rooms[0].label, "Room 1")
        self.assertEqual(self.four_rooms[3].url, "https://vhl.ink/room-4")

    def test_reference_scenario(self):
        a = assignment("09:00", "room-1", "A")
        b = assignment("09:00", "room-2", "B")
        c = assignment("10:00", "room-1", "C")

        grid = build_organizer_grid([a, b, c], self.two_rooms)

        self.assertEqual([row.time for row in grid.rows], ["09:00", "10:00"])
        self.assertEqual(grid.rows[0].cells, {"room-1": a, "room-2": b})
        self.assertEqual(grid.rows[1].cells, {"room-1": c, "room-2": None})
        self.assertEqual(grid.rooms, self.two_rooms)

    def test_rows_follow_first_seen_order_not_chronology(self):
        data = [
            assignment("2026-03-01T10:00:00Z", "room-1", "Late"),
            assignment("2026-03-01T09:00:00Z", "room-1", "Early"),
            assignment("2026-03-01T10:00:00Z", "room-2", "Late2"),
        ]

        grid = build_organizer_grid(data, self.two_rooms)

        self.assertEqual(
            [row.time for row in grid.rows],
            ["2026-03-01T10:00:00Z", "2026-03-01T09:00:00Z"],
        )

    def test_textually_different_instants_are_separate_rows(self):
        data = [
            assignment("2026-03-01T09:00:00Z", "room-1", "A"),
            assignment("2026-03-01T09:00:00+00:00", "room-2", "B"),
        ]

        grid = build_organizer_grid(data, self.two_rooms)

        self.assertEqual(len(grid.rows), 2)

    def test_grid_shape_and_no_assignment_repeats(self):
        times = ["2026-03-01T09:00:00Z", "2026-03-01T09:10:00Z", "2026-03-01T09:20:00Z"]
        data = [
            assignment(time, room.id, f"T{t}{r}")
            for t, time in enumerate(times)
            for r, room in enumerate(self.four_rooms)
            if (t + r) % 3
        ]

        grid = build_organizer_grid(data, self.four_rooms)

        self.assertEqual(len(grid.rows), len(times))
        placed = []
        for row in grid.rows:
            self.assertEqual(list(row.cells), [room.id for room in self.four_rooms])
            placed.extend(cell for cell in row.cells.values() if cell is not None)
        self.assertEqual(len(placed), len(data))
        self.assertEqual(len(set(placed)), len(placed))

    def test_unknown_room_still_creates_row(self):
        with self.assertLogs("hackops.schedule", level="WARNING"):
            grid = build_organizer_grid([assignment("11:00", "room-9", "Lost")], self.two_rooms)

        self.assertEqual(len(grid.rows), 1)
        self.assertEqual(grid.rows[0].cells, {"room-1": None, "room-2": None})

    def test_double_booked_cell_keeps_later_assignment(self):
        first = assignment("09:00", "room-1", "First")
        second = assignment("09:00", "room-1", "Second")

        with self.assertLogs("hackops.schedule", level="WARNING"):
            grid = build_organizer_grid([first, second], self.two_rooms)

        self.assertIs(grid.rows[0].cells["room-1"], second)

    def test_empty_input(self):
        grid = build_organizer_grid([], self.two_rooms)
        self.assertEqual(grid.rows, ())

    def test_display_time(self):
        grid = build_organizer_grid(
            [
                assignment("09:05", "room-1", "A"),
                assignment("2026-03-01T14:30:00Z", "room-1", "B"),
            ],
            self.two_rooms,
            tz=dt_timezone(timedelta(hours=-5)),
        )

        self.assertEqual(grid.rows[0].display_time, "9:05 AM")
        self.assertEqual(grid.rows[1].display_time, "9:30 AM")


class JudgeScheduleTests(SimpleTestCase):
    def setUp(self):
        self.data = [
            assignment(f"2026-03-01T09:{minute:02d}:00Z", "room-1", f"T{minute}")
            for minute in (0, 10, 20, 30)
        ]

    def test_cutoff_hides_past_sessions(self):
        rows = build_judge_schedule(self.data, cutoff_index=2, show_past=False)

        self.assertEqual([row.project_name for row in rows], ["T20", "T30"])

    def test_show_past_ignores_cutoff(self):
        rows = build_judge_schedule(self.data, cutoff_index=2, show_past=True)

        self.assertEqual([row.project_name for row in rows], ["T0", "T10", "T20", "T30"])

    def test_cutoff_beyond_end_is_empty(self):
        self.assertEqual(build_judge_schedule(self.data, cutoff_index=10), [])

    def test_negative_cutoff_rejected(self):
        with self.assertRaises(ValueError):
            build_judge_schedule(self.data, cutoff_index=-1)

    def test_row_projection(self):
        row = build_judge_schedule(
            self.data[:1],
            form_url_template="/judging?id={team_id}",
        )[0]

        self.assertEqual(row.time, "2026-03-01T09:00:00Z")
        self.assertEqual(row.project_name, "T0")
        self.assertEqual(row.project_link, "https://devpost.com/software/t0")
        self.assertEqual(row.member_names, ("T0 hacker",))
        self.assertEqual(row.judge_names, ("Grace",))
        self.assertEqual(row.form_link, "/judging?id=id-T0")
        self.assertEqual(row.room_link, "https://vhl.ink/room-1")
