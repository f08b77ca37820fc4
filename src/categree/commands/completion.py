"""
categree.commands.completion - Shell tab-completion setup.

Generates shell completion scripts using argcomplete.
"""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from pathlib import Path

SHELLS = ("bash", "zsh", "fish", "tcsh")

SETUP_INSTRUCTIONS = """
Shell Completion Setup for categree
===================================

Bash (add to ~/.bashrc):
  eval "$(register-python-argcomplete categree)"

Zsh (add to ~/.zshrc):
  autoload -U bashcompinit
  bashcompinit
  eval "$(register-python-argcomplete categree)"

Fish (add to ~/.config/fish/config.fish):
  register-python-argcomplete --shell fish categree | source

Tcsh (add to ~/.tcshrc):
  eval `register-python-argcomplete --shell tcsh categree`

Generate script for a specific shell:
  categree completion --shell {shell}
"""


def _detect_shell() -> str:
    """Detect the current shell from environment."""
    shell = os.environ.get("SHELL", "")
    basename = Path(shell).name if shell else ""
    if basename in SHELLS:
        return basename
    return "bash"  # default


def completion_command(shell: str) -> list[str]:
    """Return the register-python-argcomplete invocation for a shell."""
    cmd = ["register-python-argcomplete"]
    if shell in ("fish", "tcsh"):
        cmd.append(f"--shell={shell}")
    cmd.append("categree")
    return cmd


def run(args: argparse.Namespace) -> int:
    """Handle ``categree completion`` command."""
    if not args.shell:
        print(SETUP_INSTRUCTIONS.format(shell=_detect_shell()))
        return 0

    try:
        result = subprocess.run(completion_command(args.shell), capture_output=True, text=True)
    except FileNotFoundError:
        print("Error: register-python-argcomplete not found.", file=sys.stderr)
        print("Make sure argcomplete is properly installed.", file=sys.stderr)
        return 1

    if result.returncode != 0:
        print(f"Error generating completion script: {result.stderr}", file=sys.stderr)
        return 1

    print(result.stdout)
    return 0
