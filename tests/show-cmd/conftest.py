"""Shared fixtures for show-cmd tests."""

import io
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(__file__))

from fake_leetcode_executor import FakeLeetCodeExecutor  # noqa: E402

from lcode.settings import SettingsStore  # noqa: E402
from lcode.show_cmd.orchestrator import ShowDeps  # noqa: E402
from lcode.ui.menu import MenuConfig  # noqa: E402


def menu_config_by_label(choices, output=None):
    """Create a MenuConfig that resolves displayed option labels to numbers.

    A choice of None closes the input.
    """
    output = output or io.StringIO()
    it = iter(choices)

    def resolve_choice(_prompt):
        label = next(it)
        if label is None:
            raise EOFError()
        for line in reversed(output.getvalue().splitlines()):
            stripped = line.strip()
            if stripped.endswith(label) and stripped[0].isdigit():
                return stripped.split(")")[0]
        raise ValueError(f"Menu option '{label}' not found in displayed menu")

    return MenuConfig(input_fn=resolve_choice, output=output)


class ShowHarness:
    """ShowDeps wired to fakes, plus the recorded editor and build calls."""

    def __init__(self, workspace, config_path, choices=()):
        self.output = io.StringIO()
        self.executor = FakeLeetCodeExecutor()
        self.opened = []
        self.builds = []
        self.settings_store = SettingsStore(config_path)
        self.deps = ShowDeps(
            menu_config=menu_config_by_label(list(choices), output=self.output),
            output=self.output,
            settings_store=self.settings_store,
            executor=self.executor,
            workspace_root=str(workspace),
            editor_opener=self.opened.append,
            build_runner=lambda cmd, cwd: self.builds.append((cmd, cwd)),
        )


@pytest.fixture
def make_harness(tmp_path):
    workspace = tmp_path / "ws"
    workspace.mkdir()
    config_path = str(tmp_path / "config")

    def factory(choices=()):
        return ShowHarness(workspace, config_path, choices)

    return factory
