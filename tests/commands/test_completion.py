"""Tests for shell tab-completion setup."""

import argparse
import os
import subprocess
from unittest.mock import patch

from categree.commands.completion import _detect_shell, completion_command, run


class TestDetectShell:
    """Tests for _detect_shell()."""

    def test_detects_zsh(self):
        with patch.dict(os.environ, {"SHELL": "/bin/zsh"}):
            assert _detect_shell() == "zsh"

    def test_detects_fish(self):
        with patch.dict(os.environ, {"SHELL": "/usr/bin/fish"}):
            assert _detect_shell() == "fish"

    def test_defaults_to_bash_for_unknown(self):
        with patch.dict(os.environ, {"SHELL": "/bin/unknown"}):
            assert _detect_shell() == "bash"

    def test_defaults_to_bash_when_unset(self):
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_shell() == "bash"


class TestCompletionCommand:
    """Tests for completion_command()."""

    def test_bash(self):
        assert completion_command("bash") == ["register-python-argcomplete", "categree"]

    def test_fish_passes_shell(self):
        assert completion_command("fish") == [
            "register-python-argcomplete",
            "--shell=fish",
            "categree",
        ]


class TestRun:
    """Tests for run()."""

    def test_instructions_without_shell(self, capsys):
        assert run(argparse.Namespace(shell=None)) == 0
        assert "register-python-argcomplete categree" in capsys.readouterr().out

    def test_prints_script(self, capsys):
        completed = subprocess.CompletedProcess([], 0, stdout="complete -F _x categree", stderr="")
        with patch("categree.commands.completion.subprocess.run", return_value=completed):
            assert run(argparse.Namespace(shell="bash")) == 0
        assert "complete -F _x categree" in capsys.readouterr().out

    def test_missing_tool(self, capsys):
        with patch(
            "categree.commands.completion.subprocess.run", side_effect=FileNotFoundError
        ):
            assert run(argparse.Namespace(shell="zsh")) == 1
        assert "not found" in capsys.readouterr().err
