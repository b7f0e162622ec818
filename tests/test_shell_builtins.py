import io
import os
import stat
import sys
import tempfile
import unittest
from unittest.mock import patch

import shell_builtins
from constants import CLEAR_SEQUENCE
from exceptions import ArityError, ConversionError, ShellExit
from shell_state import ShellState


class TestShellBuiltins(unittest.TestCase):
    def setUp(self):
        self.state = ShellState()

        # Work in a temp dir for filesystem-related builtins
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

        self.old_cwd = os.getcwd()
        os.chdir(self.tmpdir.name)
        self.addCleanup(lambda: os.chdir(self.old_cwd))

    def run_builtin(self, name, args):
        out = io.StringIO()
        err = io.StringIO()
        with patch.object(sys, "stdout", out), patch.object(sys, "stderr", err):
            rc = self.state.builtins.lookup(name).invoke(args, self.state)
        return rc, out.getvalue(), err.getvalue()

    def make_executable(self, directory, name):
        os.makedirs(directory, exist_ok=True)
        path = os.path.join(directory, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write("#!/bin/sh\n")
        os.chmod(path, os.stat(path).st_mode | stat.S_IXUSR)
        return path

    # -----------------------
    # Registry
    # -----------------------
    def test_registry_contains_expected_builtins(self):
        for name in ("exit", "echo", "type", "pwd", "cd", "clear", "cls"):
            self.assertIn(name, self.state.builtins)

    def test_registry_lookup_unknown_returns_none(self):
        self.assertIsNone(self.state.builtins.lookup("ls"))

    def test_registry_aliases_share_one_handler(self):
        self.assertIs(self.state.builtins.lookup("clear"), self.state.builtins.lookup("cls"))

    def test_registries_are_independent(self):
        custom = shell_builtins.BuiltinRegistry([shell_builtins.EchoCommand()])
        self.assertEqual(["echo"], custom.names())
        self.assertIn("type", shell_builtins.default_registry())

    # ----------------------
    # echo
    # ----------------------
    def test_echo_joins_args(self):
        rc, out, err = self.run_builtin("echo", ["a b", "c"])
        self.assertEqual(0, rc)
        self.assertEqual("a b c\n", out)
        self.assertEqual("", err)

    def test_echo_no_args_prints_newline(self):
        rc, out, _ = self.run_builtin("echo", [])
        self.assertEqual(0, rc)
        self.assertEqual("\n", out)

    # ----------------------
    # exit
    # ----------------------
    def test_exit_without_args_exits_zero(self):
        with self.assertRaises(ShellExit) as ctx:
            self.run_builtin("exit", [])
        self.assertEqual(0, ctx.exception.status)

    def test_exit_with_code(self):
        with self.assertRaises(ShellExit) as ctx:
            self.run_builtin("exit", ["3"])
        self.assertEqual(3, ctx.exception.status)

    def test_exit_non_numeric_is_conversion_error(self):
        with self.assertRaises(ConversionError) as ctx:
            self.run_builtin("exit", ["abc"])
        self.assertEqual("exit: abc: numeric argument required", str(ctx.exception))
        self.assertEqual(2, ctx.exception.status)

    def test_exit_rejects_loosely_formatted_numbers(self):
        for value in (" 3", "3 ", "1_0", "", "0x1", "٣"):
            with self.assertRaises(ConversionError):
                self.run_builtin("exit", [value])

    def test_exit_accepts_signed_code(self):
        for value, expected in (("+3", 3), ("-1", -1), ("007", 7)):
            with self.assertRaises(ShellExit) as ctx:
                self.run_builtin("exit", [value])
            self.assertEqual(expected, ctx.exception.status)

    def test_exit_too_many_args_is_arity_error(self):
        with self.assertRaises(ArityError) as ctx:
            self.run_builtin("exit", ["1", "2"])
        self.assertEqual(2, ctx.exception.received)

    # ----------------------
    # type
    # ----------------------
    def test_type_builtin(self):
        rc, out, _ = self.run_builtin("type", ["echo"])
        self.assertEqual(0, rc)
        self.assertEqual("echo is a shell builtin\n", out)

    def test_type_not_found(self):
        with patch.dict(os.environ, {"PATH": self.tmpdir.name}):
            rc, out, _ = self.run_builtin("type", ["nonexistent_xyz"])
        self.assertEqual(0, rc)
        self.assertEqual("nonexistent_xyz: not found\n", out)

    def test_type_external_reports_first_match(self):
        first = os.path.join(self.tmpdir.name, "bin1")
        second = os.path.join(self.tmpdir.name, "bin2")
        self.make_executable(second, "tool")
        expected = self.make_executable(first, "tool")

        with patch.dict(os.environ, {"PATH": os.pathsep.join([first, second])}):
            rc, out, _ = self.run_builtin("type", ["tool"])

        self.assertEqual(0, rc)
        self.assertEqual(f"tool is {expected}\n", out)

    def test_type_requires_one_argument(self):
        with self.assertRaises(ArityError):
            self.run_builtin("type", [])
        with self.assertRaises(ArityError):
            self.run_builtin("type", ["a", "b"])

    # ----------------------
    # pwd / cd
    # ----------------------
    def test_pwd_prints_cwd(self):
        rc, out, _ = self.run_builtin("pwd", [])
        self.assertEqual(0, rc)
        self.assertEqual(os.getcwd() + "\n", out)

    def test_cd_changes_directory(self):
        os.mkdir("sub")
        rc, _, _ = self.run_builtin("cd", ["sub"])
        self.assertEqual(0, rc)
        self.assertEqual(os.path.realpath(os.path.join(self.tmpdir.name, "sub")),
                         os.path.realpath(os.getcwd()))

    def test_cd_without_args_goes_home(self):
        home = os.path.join(self.tmpdir.name, "home")
        os.mkdir(home)
        with patch.dict(os.environ, {"HOME": home}):
            rc, _, _ = self.run_builtin("cd", [])
        self.assertEqual(0, rc)
        self.assertEqual(os.path.realpath(home), os.path.realpath(os.getcwd()))

    def test_cd_expands_home_alias(self):
        home = os.path.join(self.tmpdir.name, "home")
        os.makedirs(os.path.join(home, "projects"))
        self.state = ShellState(aliases={"~": home})

        rc, _, _ = self.run_builtin("cd", ["~/projects"])
        self.assertEqual(0, rc)
        self.assertEqual(os.path.realpath(os.path.join(home, "projects")),
                         os.path.realpath(os.getcwd()))

    def test_cd_missing_directory(self):
        rc, out, err = self.run_builtin("cd", ["nowhere"])
        self.assertEqual(1, rc)
        self.assertEqual("", out)
        self.assertEqual("cd: nowhere: No such file or directory\n", err)

    def test_cd_not_a_directory(self):
        with open("file.txt", "w", encoding="utf-8") as f:
            f.write("x")
        rc, _, err = self.run_builtin("cd", ["file.txt"])
        self.assertEqual(1, rc)
        self.assertEqual("cd: file.txt: Not a directory\n", err)

    # ----------------------
    # clear
    # ----------------------
    def test_clear_writes_escape_sequence(self):
        rc, out, _ = self.run_builtin("clear", [])
        self.assertEqual(0, rc)
        self.assertEqual(CLEAR_SEQUENCE, out)


if __name__ == "__main__":
    unittest.main()
