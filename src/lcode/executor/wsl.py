"""Translate paths between a WSL distribution and its Windows host."""

import subprocess
import sys


def use_wsl(settings, platform=None) -> bool:
    """True when the executor runs inside WSL: Windows host with use_wsl enabled."""
    platform = platform or sys.platform
    return platform == "win32" and settings.use_wsl


def _wslpath(flag, path):
    result = subprocess.run(
        ["wsl", "wslpath", flag, path],
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


def to_win_path(path: str) -> str:
    """/mnt/c/work/a.ts -> C:\\work\\a.ts"""
    return _wslpath("-w", path)


def to_wsl_path(path: str) -> str:
    """C:\\work -> /mnt/c/work"""
    return _wslpath("-u", path)
