"""Interactive problem chooser: filter picks by text, then select by number."""

from typing import Optional

from lcode.ui.menu import MenuConfig, format_option, read_input

MAX_DISPLAYED = 20
PLACEHOLDER = "Select one problem"


def filter_picks(picks, query: str):
    """Return picks whose label or detail contains every word of query (case-insensitive)."""
    words = query.lower().split()
    return [
        pick for pick in picks
        if all(word in f"{pick.label} {pick.detail}".lower() for word in words)
    ]


def _display_picks(picks, output):
    print("", file=output)
    for i, pick in enumerate(picks[:MAX_DISPLAYED]):
        print(format_option(i + 1, pick.label), file=output)
        print(f"      {pick.detail}", file=output)
    if len(picks) > MAX_DISPLAYED:
        print(f"  ... {len(picks) - MAX_DISPLAYED} more, type to narrow the list", file=output)
    print("", file=output)


def choose_pick(picks, *, config=None) -> Optional[str]:
    """Let the user pick one entry and return its value, or None when dismissed.

    A number selects from the displayed list; any other text narrows the
    current list to entries matching it on label or detail.
    """
    if config is None:
        config = MenuConfig()

    if not picks:
        print("No problems found.", file=config.output)
        return None

    visible = list(picks)
    print(PLACEHOLDER, file=config.output)
    while True:
        if not visible:
            print("No matching problems.", file=config.output)
            visible = list(picks)
        _display_picks(visible, config.output)
        raw = read_input("Number to select, text to filter, q to cancel: ", config)
        if raw is None:
            return None
        if raw.isdigit() and 1 <= int(raw) <= min(len(visible), MAX_DISPLAYED):
            return visible[int(raw) - 1].value
        if raw:
            visible = filter_picks(picks, raw)
