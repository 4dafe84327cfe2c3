import io
import unittest
from contextlib import redirect_stdout

from iosh_lib.repl.context import CliContext, UserMode, PrivilegedMode, ConfigMode, InterfaceMode
from iosh_lib.repl.dispatcher import complete, completion_prefix, execute_command, resolve_command
from iosh_lib.repl.errors import UnknownCommand
from iosh_lib.repl.registry import Command, build_command_registry


def _noop(args, ctx, clock):
    pass


def run(line, commands, ctx, clock=None):
    buf = io.StringIO()
    with redirect_stdout(buf):
        ok = execute_command(line, commands, ctx, clock)
    return ok, buf.getvalue()


class TestRegistry(unittest.TestCase):
    def test_names_are_keys_and_unique(self):
        commands = build_command_registry()
        for name, command in commands.items():
            self.assertEqual(name, command.name)

    def test_no_name_prefixes_another(self):
        names = list(build_command_registry())
        for n1 in names:
            for n2 in names:
                if n1 != n2:
                    self.assertFalse(n2.startswith(n1), f"{n1!r} prefixes {n2!r}")

    def test_core_commands_registered(self):
        commands = build_command_registry()
        for name in ("enable", "configure terminal", "interface", "hostname", "ifconfig",
                     "show running-config", "write memory", "show clock", "clock set",
                     "help", "show version"):
            self.assertIn(name, commands)

    def test_build_is_deterministic(self):
        self.assertEqual(list(build_command_registry()), list(build_command_registry()))


class TestResolve(unittest.TestCase):
    def setUp(self):
        self.commands = build_command_registry()

    def test_multi_word_name(self):
        command, args = resolve_command("configure terminal", self.commands)
        self.assertEqual(command.name, "configure terminal")
        self.assertEqual(args, [])

    def test_longest_prefix_wins(self):
        commands = {
            "show": Command("show", "", _noop),
            "show version": Command("show version", "", _noop),
        }
        command, args = resolve_command("show version", commands)
        self.assertEqual(command.name, "show version")
        self.assertEqual(args, [])

        command, args = resolve_command("show clock", commands)
        self.assertEqual(command.name, "show")
        self.assertEqual(args, ["clock"])

    def test_arguments_split_on_whitespace(self):
        command, args = resolve_command("  ifconfig   eth1  10.0.0.5 up  ", self.commands)
        self.assertEqual(command.name, "ifconfig")
        self.assertEqual(args, ["eth1", "10.0.0.5", "up"])

    def test_unknown_command(self):
        with self.assertRaises(UnknownCommand):
            resolve_command("frobnicate", self.commands)
        with self.assertRaises(UnknownCommand):
            resolve_command("", self.commands)

    def test_deterministic(self):
        first = resolve_command("interface g0/0", self.commands)
        second = resolve_command("interface g0/0", self.commands)
        self.assertEqual(first[0].name, second[0].name)
        self.assertEqual(first[1], second[1])
        self.assertEqual(first[1], ["g0/0"])


class TestCompletion(unittest.TestCase):
    def setUp(self):
        self.commands = build_command_registry()

    def test_second_token_for_partial_first_word(self):
        commands = {
            "enable": Command("enable", "", _noop),
            "configure terminal": Command("configure terminal", "", _noop),
            "help": Command("help", "", _noop),
        }
        self.assertEqual(complete("conf", commands, PrivilegedMode()), ["terminal"])

    def test_completion_prefix_strips_question_mark(self):
        self.assertEqual(completion_prefix(" conf? "), "conf")
        self.assertEqual(completion_prefix("show ?"), "show")
        self.assertEqual(completion_prefix("?"), "")

    def test_user_mode_only_enable(self):
        self.assertEqual(complete("", self.commands, UserMode()), ["enable"])
        self.assertEqual(complete("con", self.commands, UserMode()), [])

    def test_privileged_first_words(self):
        self.assertEqual(
            complete("", self.commands, PrivilegedMode()),
            ["configure", "help", "ifconfig", "show", "write"],
        )

    def test_privileged_show_subcommands(self):
        suggestions = complete("show", self.commands, PrivilegedMode())
        self.assertIn("running-config", suggestions)
        self.assertIn("version", suggestions)
        self.assertIn("clock", suggestions)
        self.assertEqual(len(suggestions), len(set(suggestions)))

    def test_prefix_with_space(self):
        self.assertEqual(complete("show run", self.commands, PrivilegedMode()), ["running-config"])

    def test_config_mode(self):
        self.assertEqual(
            complete("", self.commands, ConfigMode()),
            ["help", "hostname", "ifconfig", "interface", "write"],
        )
        self.assertEqual(complete("show", self.commands, ConfigMode()), [])

    def test_interface_mode_has_no_completions(self):
        self.assertEqual(complete("", self.commands, InterfaceMode("g0/0")), [])

    def test_question_mark_does_not_execute(self):
        ctx = CliContext()
        ok, out = run("en?", self.commands, ctx)
        self.assertTrue(ok)
        self.assertIn("Possible completions for 'en?':", out)
        self.assertIn("  enable", out)
        self.assertEqual(ctx.mode, UserMode())

    def test_no_matches(self):
        ok, out = run("xyz?", self.commands, CliContext())
        self.assertIn("No matching commands found for 'xyz?'", out)


class TestExecute(unittest.TestCase):
    def setUp(self):
        self.commands = build_command_registry()

    def test_success_acknowledgement(self):
        ctx = CliContext()
        ok, out = run("enable", self.commands, ctx)
        self.assertTrue(ok)
        self.assertIn("Command 'enable' executed successfully.", out)

    def test_error_message_surfaced(self):
        ctx = CliContext()
        ok, out = run("configure terminal", self.commands, ctx)
        self.assertFalse(ok)
        self.assertIn("only available in Privileged EXEC mode", out)
        self.assertNotIn("executed successfully", out)

    def test_unknown_command(self):
        ok, out = run("frobnicate now", self.commands, CliContext())
        self.assertFalse(ok)
        self.assertIn("Invalid command: frobnicate now", out)

    def test_blank_line_is_ignored(self):
        ok, out = run("   ", self.commands, CliContext())
        self.assertTrue(ok)
        self.assertEqual(out, "")
