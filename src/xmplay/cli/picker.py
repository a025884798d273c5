"""Interactive single-selection picker."""

from collections.abc import Sequence
from typing import TypeVar

from rich.console import Console
from rich.prompt import Prompt

T = TypeVar("T")


def pick(items: Sequence[T], console: Console, prompt: str = "Select") -> T | None:
    """
    Ask the user to choose one of ``items`` by its 1-based index.

    The items are expected to have been displayed already.

    Returns:
        The chosen item, or None if the list is empty or the answer is blank
    """
    if not items:
        return None

    while True:
        answer = Prompt.ask(
            f"{prompt} [1-{len(items)}, Enter to cancel]",
            console=console,
            default="",
            show_default=False,
        ).strip()

        if not answer:
            return None
        if answer.isdigit() and 1 <= int(answer) <= len(items):
            return items[int(answer) - 1]

        console.print(f"[red]Please enter a number between 1 and {len(items)}.[/red]")
