"""Tests for lib/command.py, lib/files.py and lib/prompt.py."""

import os
import sys

import pytest

from smb_bootstrap.lib.command import CommandError, SubprocessRunner, fmt_argv, run_cmd
from smb_bootstrap.lib.files import append_line_once, make_executable, write_file
from smb_bootstrap.lib.prompt import ask_yes_no


class TestRunCmd:
    def test_captures_stdout(self):
        r = run_cmd([sys.executable, "-c", "print('hello')"])
        assert r.ok
        assert r.stdout.strip() == "hello"

    def test_check_raises(self):
        with pytest.raises(CommandError) as ei:
            run_cmd([sys.executable, "-c", "import sys; sys.exit(3)"])
        assert ei.value.returncode == 3

    def test_unchecked_returns_code(self):
        r = run_cmd([sys.executable, "-c", "import sys; sys.exit(3)"], check=False)
        assert r.returncode == 3

    def test_dry_run_does_not_execute(self, tmp_path):
        marker = tmp_path / "marker"
        r = run_cmd([sys.executable, "-c", f"open({str(marker)!r}, 'w')"], dry_run=True)
        assert r.ok
        assert not marker.exists()

    def test_fmt_argv_quotes(self):
        assert fmt_argv(["echo", "a b"]) == "echo 'a b'"


class TestSubprocessRunner:
    def test_which(self):
        assert SubprocessRunner().which("definitely-not-a-real-binary-xyz") is None

    def test_cwd(self, tmp_path):
        r = SubprocessRunner().run([sys.executable, "-c", "import os; print(os.getcwd())"], cwd=str(tmp_path))
        assert os.path.samefile(r.stdout.strip(), tmp_path)


class TestFiles:
    def test_write_overwrites(self, tmp_path):
        p = tmp_path / "a" / "f.txt"
        write_file(p, "one")
        write_file(p, "two")
        assert p.read_text() == "two"

    def test_dry_run_writes_nothing(self, tmp_path):
        p = tmp_path / "f.txt"
        write_file(p, "x", dry_run=True)
        assert append_line_once(p, "y", dry_run=True) is True
        assert not p.exists()

    def test_append_once(self, tmp_path):
        p = tmp_path / ".bashrc"
        assert append_line_once(p, "export X=1") is True
        assert append_line_once(p, "export X=1") is False
        assert p.read_text() == "export X=1\n"

    def test_make_executable(self, tmp_path):
        p = tmp_path / "s.sh"
        p.write_text("#!/bin/bash\n")
        make_executable(p)
        assert os.access(p, os.X_OK)


class TestAskYesNo:
    @pytest.mark.parametrize("reply,expected", [("y", True), ("Y", True), ("yes", True), ("", False), ("n", False), ("maybe", False)])
    def test_replies(self, reply, expected):
        assert ask_yes_no("Proceed?", input_fn=lambda _: reply) is expected

    def test_eof_means_no(self):
        def _eof(_):
            raise EOFError

        assert ask_yes_no("Proceed?", input_fn=_eof) is False
