"""Numbered-option menu whose result is the chosen index, or None when dismissed."""

import sys
from dataclasses import dataclass, field
from typing import Callable, Optional, TextIO

CANCEL_INPUTS = ("q", "quit")


@dataclass
class MenuConfig:
    """Where menus read answers from and print options to."""

    input_fn: Callable[[str], str] = field(default_factory=lambda: input)
    output: TextIO = field(default_factory=lambda: sys.stderr)


def format_option(number, label, is_default=False) -> str:
    line = f"  {number}) {label}"
    return f"{line} [default]" if is_default else line


def _show_menu(prompt, options, default, output):
    lines = ["", prompt]
    lines += [format_option(n, option, n == default) for n, option in enumerate(options, 1)]
    lines.append("")
    print("\n".join(lines), file=output)


def _prompt_text(option_count, default):
    hint = f"1-{option_count}, q to cancel"
    if default:
        return f"Enter your choice ({hint}) [default: {default}]: "
    return f"Enter your choice ({hint}): "


def read_input(prompt_text, config) -> Optional[str]:
    """Read one line of input; None means the input was closed or cancelled."""
    try:
        raw = config.input_fn(prompt_text)
    except EOFError:
        print("", file=config.output)
        return None
    raw = raw.strip()
    if raw.lower() in CANCEL_INPUTS:
        return None
    return raw


def _choice_number(raw, option_count, default):
    if not raw:
        return default or None
    number = int(raw) if raw.isdigit() else 0
    return number if 1 <= number <= option_count else None


def get_user_choice(prompt, default, options, *, config=None) -> Optional[int]:
    """Display numbered options and return the user's selection.

    Args:
        prompt: Header text displayed above the options.
        default: 1-based index of the default option, or None for no default.
        options: List of option label strings.
        config: MenuConfig with input_fn and output stream (defaults apply).

    Returns:
        1-based index of the selected option, or None if the user cancelled
        (``q``) or the input was closed.
    """
    config = config or MenuConfig()
    _show_menu(prompt, options, default, config.output)
    prompt_text = _prompt_text(len(options), default)

    while True:
        raw = read_input(prompt_text, config)
        if raw is None:
            return None
        number = _choice_number(raw, len(options), default)
        if number is not None:
            return number
        print(
            f"Invalid choice. Please enter a number between 1 and {len(options)}.",
            file=config.output,
        )


def choose_option(prompt, options, *, default=None, config=None) -> Optional[str]:
    """Like get_user_choice, but returns the chosen option label itself."""
    choice = get_user_choice(prompt, default, options, config=config)
    if choice is None:
        return None
    return options[choice - 1]
