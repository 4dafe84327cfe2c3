import io
import signal
import tempfile
import unittest
from contextlib import redirect_stdout
from datetime import datetime
from pathlib import Path

from prompt_toolkit.document import Document

from iosh_lib.device import Clock
from iosh_lib.repl.completer import CommandCompleter
from iosh_lib.repl.loop import run_repl
from iosh_lib.repl.registry import build_command_registry
from iosh_lib.repl.signals import InterruptFlag


class FakeSession:
    """Replays scripted input lines; exception instances are raised instead."""

    def __init__(self, script):
        self.script = list(script)
        self.prompts = []

    def prompt(self, message):
        self.prompts.append(message)
        if not self.script:
            raise EOFError()
        item = self.script.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


class QuietInterruptFlag(InterruptFlag):
    def install(self):
        pass

    def restore(self):
        pass


class TestCompleter(unittest.TestCase):
    def setUp(self):
        self.completer = CommandCompleter(build_command_registry())

    def completions(self, text):
        return [c.text for c in self.completer.get_completions(Document(text), None)]

    def test_command_names(self):
        self.assertEqual(self.completions("conf"), ["configure terminal"])
        self.assertIn("show version", self.completions("show v"))

    def test_interface_suggestions(self):
        self.assertEqual(
            self.completions("interface Gig"),
            ["GigabitEthernet0/0", "GigabitEthernet0/1"],
        )

    def test_no_completions_after_argument(self):
        self.assertEqual(self.completions("interface g0/0 x"), [])


class TestInterruptFlag(unittest.TestCase):
    def test_handler_sets_flag(self):
        flag = InterruptFlag()
        flag._handle_sigint(signal.SIGINT, None)
        self.assertTrue(flag.consume())
        self.assertFalse(flag.consume())

    def test_install_and_restore(self):
        flag = InterruptFlag()
        previous = signal.getsignal(signal.SIGINT)
        flag.install()
        try:
            self.assertEqual(signal.getsignal(signal.SIGINT), flag._handle_sigint)
        finally:
            flag.restore()
        self.assertEqual(signal.getsignal(signal.SIGINT), previous)


class TestRunRepl(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmpdir = Path(self._tmp.name)
        self.history_file = self.tmpdir / "history.txt"
        self.config_file = self.tmpdir / "startup-config.json"
        self.history_file.write_text("enable\n")

    def tearDown(self):
        self._tmp.cleanup()

    def run_script(self, script):
        session = FakeSession(script)
        clock = Clock(start=datetime(2024, 6, 1, 12, 0, 0))
        buf = io.StringIO()
        with redirect_stdout(buf):
            status = run_repl(self.history_file, self.config_file, session=session,
                              clock=clock, interrupt=QuietInterruptFlag())
        self.assertEqual(status, 0)
        return session, buf.getvalue()

    def test_interrupt_returns_to_privileged_mode(self):
        session, out = self.run_script([
            "enable",
            "configure terminal",
            "interface g0/0",
            KeyboardInterrupt(),
        ])
        self.assertEqual(session.prompts, [
            "Router> ",
            "Router# ",
            "Router(config)# ",
            "Router(config-if)# g0/0 ",
            "Router# ",
        ])
        self.assertIn("^C", out)

    def test_interrupt_in_user_mode(self):
        session, _ = self.run_script([KeyboardInterrupt()])
        self.assertEqual(session.prompts, ["Router> ", "Router> "])

    def test_exit_cli_discards_history(self):
        session, out = self.run_script(["enable", "exit cli", "disable"])
        self.assertFalse(self.history_file.exists())
        self.assertEqual(len(session.prompts), 2)
        self.assertIn("Goodbye!", out)

    def test_eof_keeps_history(self):
        _, out = self.run_script(["enable"])
        self.assertTrue(self.history_file.exists())
        self.assertIn("Goodbye!", out)

    def test_saved_hostname_used_for_prompt(self):
        self.run_script(["enable", "configure terminal", "hostname Edge1", "write memory"])
        session, _ = self.run_script([])
        self.assertEqual(session.prompts, ["Edge1> "])

    def test_errors_do_not_stop_the_loop(self):
        session, out = self.run_script(["bogus", "hostname X", "enable"])
        self.assertIn("Invalid command: bogus", out)
        self.assertEqual(session.prompts[-1], "Router# ")
