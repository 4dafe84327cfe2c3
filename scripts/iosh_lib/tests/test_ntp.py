import io
import unittest
from contextlib import redirect_stdout

from iosh_lib.device import NtpState
from iosh_lib.repl.context import CliContext, PrivilegedMode, ConfigMode
from iosh_lib.repl.dispatcher import execute_command
from iosh_lib.repl.registry import build_command_registry


class TestNtpState(unittest.TestCase):
    def test_add_server_creates_association(self):
        ntp = NtpState()
        self.assertTrue(ntp.add_server("10.0.0.1"))
        self.assertFalse(ntp.add_server("10.0.0.1"))
        self.assertEqual(ntp.servers, ["10.0.0.1"])
        self.assertEqual(len(ntp.associations), 1)
        assoc = ntp.associations[0]
        self.assertEqual(assoc.ref_clock, ".INIT.")
        self.assertEqual(assoc.stratum, 16)

    def test_clear_reinitializes_associations(self):
        ntp = NtpState()
        ntp.add_server("10.0.0.1")
        ntp.associations[0].reach = 377
        ntp.clear_associations()
        self.assertEqual(len(ntp.associations), 1)
        self.assertEqual(ntp.associations[0].reach, 0)


class TestNtpCommands(unittest.TestCase):
    def setUp(self):
        self.commands = build_command_registry()
        self.ctx = CliContext()

    def run_cmd(self, line):
        buf = io.StringIO()
        with redirect_stdout(buf):
            ok = execute_command(line, self.commands, self.ctx, None)
        return ok, buf.getvalue()

    def test_ntp_server(self):
        self.ctx.set_mode(ConfigMode())
        ok, out = self.run_cmd("ntp server 192.0.2.10")
        self.assertTrue(ok)
        self.assertIn("NTP server 192.0.2.10 configured.", out)
        self.assertEqual(self.ctx.ntp.servers, ["192.0.2.10"])

    def test_ntp_server_validation(self):
        self.ctx.set_mode(ConfigMode())
        ok, out = self.run_cmd("ntp server 192.0.2.300")
        self.assertFalse(ok)
        self.assertIn("Invalid IP address format.", out)
        ok, out = self.run_cmd("ntp server")
        self.assertFalse(ok)
        self.assertIn("Usage: ntp server <ip_address>", out)
        self.assertEqual(self.ctx.ntp.servers, [])

    def test_ntp_server_needs_config_mode(self):
        self.ctx.set_mode(PrivilegedMode())
        ok, _ = self.run_cmd("ntp server 192.0.2.10")
        self.assertFalse(ok)
        self.assertEqual(self.ctx.ntp.servers, [])

    def test_show_ntp_associations(self):
        self.ctx.set_mode(PrivilegedMode())
        ok, out = self.run_cmd("show ntp associations")
        self.assertTrue(ok)
        self.assertIn("No NTP associations configured.", out)

        self.ctx.ntp.add_server("192.0.2.10")
        ok, out = self.run_cmd("show ntp associations")
        self.assertTrue(ok)
        self.assertIn("~192.0.2.10", out)
        self.assertIn(".INIT.", out)

    def test_do_show_ntp_associations(self):
        self.ctx.set_mode(ConfigMode())
        self.run_cmd("ntp server 192.0.2.10")
        ok, out = self.run_cmd("do show ntp associations")
        self.assertTrue(ok)
        self.assertIn("~192.0.2.10", out)
        self.assertEqual(self.ctx.mode, ConfigMode())

    def test_clear_ntp_associations(self):
        self.ctx.ntp.add_server("192.0.2.10")
        ok, _ = self.run_cmd("clear ntp associations")
        self.assertFalse(ok)

        self.ctx.set_mode(PrivilegedMode())
        ok, out = self.run_cmd("clear ntp associations")
        self.assertTrue(ok)
        self.assertIn("NTP associations cleared and reinitialized.", out)
        self.assertEqual(len(self.ctx.ntp.associations), 1)
