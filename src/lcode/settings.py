"""User settings: read and write the YAML-like lcode config file."""

import os
from dataclasses import dataclass
from typing import Optional

import click

LANGUAGES = (
    "bash",
    "c",
    "cpp",
    "csharp",
    "golang",
    "java",
    "javascript",
    "kotlin",
    "mysql",
    "php",
    "python",
    "python3",
    "ruby",
    "rust",
    "scala",
    "swift",
    "typescript",
)

DEFAULT_BUILD_COMMAND = "ts-node build.ts -i {id}"

_BOOLEAN_KEYS = ("show_set_default_language_hint", "use_wsl")


@dataclass
class Settings:
    default_language: Optional[str] = None
    show_set_default_language_hint: bool = True
    use_wsl: bool = False
    build_command: str = DEFAULT_BUILD_COMMAND

    @property
    def valid_default_language(self) -> Optional[str]:
        """The persisted default language, or None if unset or unsupported."""
        if self.default_language in LANGUAGES:
            return self.default_language
        return None


def default_settings_path():
    return os.path.join(click.get_app_dir("lcode"), "config")


def read_settings(path) -> Settings:
    """Read settings from a YAML-like file.

    Missing files and unknown keys are ignored; absent keys keep their
    defaults. An empty build_command disables the build step.
    """
    settings = Settings()
    if not os.path.isfile(path):
        return settings

    with open(path) as f:
        for line in f:
            key, sep, value = line.strip().partition(":")
            if not sep:
                continue
            key, value = key.strip(), value.strip()
            if key in _BOOLEAN_KEYS:
                setattr(settings, key, value == "true")
            elif key == "default_language":
                settings.default_language = value or None
            elif key == "build_command":
                settings.build_command = value
    return settings


def write_settings(path, settings: Settings):
    """Write settings to a YAML-like file, creating its directory if needed."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w") as f:
        if settings.default_language:
            f.write(f"default_language: {settings.default_language}\n")
        f.write(
            "show_set_default_language_hint: "
            f"{str(settings.show_set_default_language_hint).lower()}\n"
        )
        f.write(f"use_wsl: {str(settings.use_wsl).lower()}\n")
        f.write(f"build_command: {settings.build_command}\n")


class SettingsStore:
    """Settings file bound to a path; each update is read-modify-write."""

    def __init__(self, path=None):
        self.path = path or default_settings_path()

    def load(self) -> Settings:
        return read_settings(self.path)

    def update(self, **changes) -> Settings:
        settings = self.load()
        for key, value in changes.items():
            if not hasattr(settings, key):
                raise ValueError(f"Unknown setting: {key}")
            setattr(settings, key, value)
        write_settings(self.path, settings)
        return settings
