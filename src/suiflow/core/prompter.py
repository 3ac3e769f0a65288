"""Interactive questions asked during installation.

Architecture:
- Prompter: Abstract base class defining the interface
- RealPrompter: click prompts with a rich catalog table
- FakePrompter (tests/fakes/prompter.py): scripted answers for tests
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

import click
from rich.console import Console
from rich.table import Table


class Prompter(ABC):
    """Abstract interface for questions that need a person to answer."""

    @abstractmethod
    def confirm_overwrite(self, display_name: str) -> bool:
        """Ask whether an existing component file may be overwritten.

        Args:
            display_name: PascalCase component name shown to the user

        Returns:
            True to overwrite, False to keep the existing file
        """
        ...

    @abstractmethod
    def select_components(self, choices: Sequence[str]) -> list[str]:
        """Ask which catalog components to add.

        Args:
            choices: Catalog component names, in display order

        Returns:
            Selected names in catalog order (possibly empty)
        """
        ...


class RealPrompter(Prompter):
    """Production implementation prompting on the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console if console is not None else Console(stderr=True)

    def confirm_overwrite(self, display_name: str) -> bool:
        return click.confirm(
            f"The component {display_name} already exists. Do you want to overwrite it?",
            default=False,
            err=True,
        )

    def select_components(self, choices: Sequence[str]) -> list[str]:
        table = Table(title="Available components", show_header=True, header_style="bold")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Component", style="cyan")
        for index, name in enumerate(choices, start=1):
            table.add_row(str(index), name)
        self._console.print(table)

        answer = click.prompt(
            "Which components would you like to add? (numbers or names, comma-separated)",
            default="",
            show_default=False,
            err=True,
        )
        return parse_selection(answer, choices)


def parse_selection(answer: str, choices: Sequence[str]) -> list[str]:
    """Turn a comma-separated answer into catalog names.

    Entries may be 1-based indexes into `choices` or component names.
    Unrecognized entries are ignored. The result follows catalog order.

    Example:
        >>> parse_selection("2, nft-card", ["connect-button", "connector", "nft-card"])
        ['connector', 'nft-card']
    """
    selected: set[str] = set()
    for raw in answer.split(","):
        entry = raw.strip()
        if not entry:
            continue
        if entry.isdigit():
            index = int(entry) - 1
            if 0 <= index < len(choices):
                selected.add(choices[index])
        elif entry in choices:
            selected.add(entry)
    return [name for name in choices if name in selected]
