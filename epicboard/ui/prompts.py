"""
User input prompts used by the navigator.

Prompts is a bundle of plain callables so tests can swap any of them out.
`Prompts.interactive()` builds the real rich-backed versions.
"""

from dataclasses import dataclass
from typing import Callable

from rich.console import Console
from rich.prompt import Confirm, Prompt

from epicboard.models import Epic, Status, Story

STATUS_CHOICES = {
    "1": Status.OPEN,
    "2": Status.IN_PROGRESS,
    "3": Status.RESOLVED,
    "4": Status.CLOSED,
}

STATUS_PROMPT = "New Status (1 - OPEN, 2 - IN-PROGRESS, 3 - RESOLVED, 4 - CLOSED): "
DELETE_EPIC_PROMPT = "Are you sure you want to delete this epic? All stories in this epic will also be deleted"
DELETE_STORY_PROMPT = "Are you sure you want to delete this story?"

SEPARATOR = "-" * 28


def parse_status_choice(text: str) -> Status | None:
    """Map a menu choice ("1".."4") to a Status, anything else to None."""
    return STATUS_CHOICES.get(text.strip())


def _ask_fields(console: Console, kind: str) -> tuple[str, str]:
    console.print(SEPARATOR)
    name = Prompt.ask(f"{kind} Name", console=console, default="", show_default=False)
    description = Prompt.ask(f"{kind} Description", console=console, default="", show_default=False)
    return name.strip(), description.strip()


def prompt_create_epic(console: Console) -> Epic:
    name, description = _ask_fields(console, "Epic")
    return Epic(name=name, description=description)


def prompt_create_story(console: Console) -> Story:
    name, description = _ask_fields(console, "Story")
    return Story(name=name, description=description)


def prompt_update_status(console: Console) -> Status | None:
    console.print(SEPARATOR)
    return parse_status_choice(console.input(STATUS_PROMPT))


def prompt_delete_epic(console: Console) -> bool:
    console.print(SEPARATOR)
    return Confirm.ask(DELETE_EPIC_PROMPT, console=console, default=False)


def prompt_delete_story(console: Console) -> bool:
    console.print(SEPARATOR)
    return Confirm.ask(DELETE_STORY_PROMPT, console=console, default=False)


@dataclass
class Prompts:
    create_epic: Callable[[], Epic]
    create_story: Callable[[], Story]
    update_status: Callable[[], Status | None]
    delete_epic: Callable[[], bool]
    delete_story: Callable[[], bool]

    @classmethod
    def interactive(cls, console: Console | None = None) -> "Prompts":
        """Prompts that ask the user on `console`."""
        console = console or Console()
        return cls(
            create_epic=lambda: prompt_create_epic(console),
            create_story=lambda: prompt_create_story(console),
            update_status=lambda: prompt_update_status(console),
            delete_epic=lambda: prompt_delete_epic(console),
            delete_story=lambda: prompt_delete_story(console),
        )
