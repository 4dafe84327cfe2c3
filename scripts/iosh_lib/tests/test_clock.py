import io
import unittest
from contextlib import redirect_stdout
from datetime import datetime, timedelta

from iosh_lib.device import Clock, format_clock, format_uptime
from iosh_lib.repl.context import CliContext, PrivilegedMode, ConfigMode
from iosh_lib.repl.dispatcher import execute_command
from iosh_lib.repl.registry import build_command_registry


class FakeMonotonic:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class ClockTestCase(unittest.TestCase):
    def setUp(self):
        self.commands = build_command_registry()
        self.ctx = CliContext()
        self.monotonic = FakeMonotonic()
        self.clock = Clock(start=datetime(2024, 6, 1, 12, 0, 0), monotonic=self.monotonic)

    def run_cmd(self, line, clock=True):
        buf = io.StringIO()
        with redirect_stdout(buf):
            ok = execute_command(line, self.commands, self.ctx, self.clock if clock else None)
        return ok, buf.getvalue()


class TestClockModel(unittest.TestCase):
    def test_time_advances(self):
        monotonic = FakeMonotonic()
        clock = Clock(start=datetime(2024, 6, 1, 12, 0, 0), monotonic=monotonic)
        monotonic.advance(90)
        self.assertEqual(clock.current_datetime(), datetime(2024, 6, 1, 12, 1, 30))

    def test_leap_day(self):
        clock = Clock(start=datetime(2024, 6, 1), monotonic=FakeMonotonic())
        clock.set("08:00:00", "29", "February", "2024")
        self.assertEqual(clock.current_datetime(), datetime(2024, 2, 29, 8, 0, 0))

    def test_month_abbreviation(self):
        clock = Clock(start=datetime(2024, 6, 1), monotonic=FakeMonotonic())
        clock.set("08:00:00", "3", "mar", "2030")
        self.assertEqual(clock.current_datetime().month, 3)

    def test_set_time_and_date_separately(self):
        clock = Clock(start=datetime(2024, 6, 1, 12, 0, 0), monotonic=FakeMonotonic())
        clock.set_time("07:15:30")
        self.assertEqual(clock.current_datetime(), datetime(2024, 6, 1, 7, 15, 30))
        clock.set_date("20", "Dec", "2026")
        self.assertEqual(clock.current_datetime(), datetime(2026, 12, 20, 7, 15, 30))
        with self.assertRaises(ValueError):
            clock.set_time("12:60:00")

    def test_invalid_set_leaves_clock_unchanged(self):
        start = datetime(2024, 6, 1, 12, 0, 0)
        clock = Clock(start=start, monotonic=FakeMonotonic())
        with self.assertRaises(ValueError):
            clock.set("10:00:00", "31", "April", "2024")
        self.assertEqual(clock.current_datetime(), start)

    def test_format_clock(self):
        self.assertEqual(
            format_clock(datetime(2025, 1, 15, 12, 30, 45)),
            "12:30:45 UTC Wed January 15 2025",
        )

    def test_format_uptime(self):
        value = timedelta(days=3, hours=2, minutes=5, seconds=59)
        self.assertEqual(format_uptime("Router", value), "Router uptime is 3 days, 2 hours, 5 minutes")


class TestClockCommands(ClockTestCase):
    def test_set_then_show(self):
        ok, out = self.run_cmd("clock set 12:30:45 15 January 2025")
        self.assertTrue(ok)
        self.assertIn("Clock set to:", out)

        self.ctx.set_mode(PrivilegedMode())
        ok, out = self.run_cmd("show clock")
        self.assertTrue(ok)
        self.assertIn("12:30:45", out)
        self.assertIn("Wed January 15 2025", out)

    def test_invalid_values(self):
        for line in (
            "clock set 25:00:00 15 January 2025",
            "clock set 12:00:00 30 February 2023",
            "clock set 12:00:00 15 January 1992",
            "clock set 12:00:00 15 Smarch 2025",
        ):
            ok, _ = self.run_cmd(line)
            self.assertFalse(ok, line)
        self.assertEqual(self.clock.current_datetime(), datetime(2024, 6, 1, 12, 0, 0))

    def test_wrong_argument_count(self):
        ok, out = self.run_cmd("clock set 12:00:00 15 January")
        self.assertFalse(ok)
        self.assertIn("clock set <hh:mm:ss> <day> <month> <year>", out)
        ok, _ = self.run_cmd("clock set 12:00:00 15 January 2025 extra")
        self.assertFalse(ok)

    def test_clock_unavailable(self):
        self.ctx.set_mode(PrivilegedMode())
        for line in ("clock set 12:30:45 15 January 2025", "show clock", "show uptime"):
            ok, out = self.run_cmd(line, clock=False)
            self.assertFalse(ok)
            self.assertIn("Clock functionality is unavailable.", out)

    def test_show_clock_needs_privileged_mode(self):
        ok, out = self.run_cmd("show clock")
        self.assertFalse(ok)
        self.assertIn("only available in Privileged EXEC mode", out)
        self.ctx.set_mode(ConfigMode())
        ok, _ = self.run_cmd("show clock")
        self.assertFalse(ok)

    def test_show_uptime(self):
        self.monotonic.advance(3 * 86400 + 2 * 3600 + 5 * 60)
        ok, out = self.run_cmd("show uptime")
        self.assertTrue(ok)
        self.assertIn("Router uptime is 3 days, 2 hours, 5 minutes", out)
