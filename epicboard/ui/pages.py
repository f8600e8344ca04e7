"""
Pages (screens) for the epicboard TUI.

A page renders itself and turns raw input into an optional Action. Pages only
read the store; the navigator owns every side effect.
"""

import re
from abc import ABC, abstractmethod

from rich.console import Console

from epicboard.db import Store
from epicboard.errors import ScreenStale
from epicboard.models import (
    Action,
    CreateEpic,
    CreateStory,
    DeleteEpic,
    DeleteStory,
    Exit,
    NavigateToEpicDetail,
    NavigateToPreviousPage,
    NavigateToStoryDetail,
    UpdateEpicStatus,
    UpdateStoryStatus,
)
from epicboard.ui.helpers import build_table

ID_PATTERN = re.compile(r'[0-9]+')

HOME_HINT = "[q] quit | [c] create epic | [:id:] navigate to epic"
EPIC_HINT = "[p] previous | [u] update epic | [d] delete epic | [c] create story | [:id:] navigate to story"
STORY_HINT = "[p] previous | [u] update story | [d] delete story"


def parse_id(text: str) -> int | None:
    """Parse a bare ASCII digit string. Anything else (signs, spaces, newlines) is None."""
    if not ID_PATTERN.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        # past the interpreter's int string length limit
        return None


class Page(ABC):
    def __init__(self, store: Store, console: Console | None = None):
        self.store = store
        self.console = console or Console()

    @abstractmethod
    def render(self) -> None:
        """Draw the page. Raises ScreenStale if the bound id is gone."""

    @abstractmethod
    def interpret(self, raw: str) -> Action | None:
        """Map input to an action, or None when the input means nothing here."""


class HomePage(Page):
    """All epics."""

    def render(self) -> None:
        state = self.store.read()
        rows = [
            [str(epic_id), state.epics[epic_id].name, state.epics[epic_id].status.label]
            for epic_id in sorted(state.epics)
        ]
        self.console.print(build_table("EPICS", [("id", 11), ("name", 32), ("status", 17)], rows))
        self.console.print()
        self.console.print(HOME_HINT, markup=False, emoji=False, highlight=False)

    def interpret(self, raw: str) -> Action | None:
        if raw == "q":
            return Exit()
        if raw == "c":
            return CreateEpic()

        epic_id = parse_id(raw)
        if epic_id is None:
            return None
        if epic_id in self.store.read().epics:
            return NavigateToEpicDetail(epic_id=epic_id)
        return None

    def __repr__(self) -> str:
        return "HomePage()"


class EpicDetail(Page):
    """One epic and the stories it owns."""

    def __init__(self, store: Store, epic_id: int, console: Console | None = None):
        super().__init__(store, console)
        self.epic_id = epic_id

    def render(self) -> None:
        state = self.store.read()
        epic = state.epics.get(self.epic_id)
        if epic is None:
            raise ScreenStale("EpicDetail", "epic", self.epic_id)

        self.console.print(build_table(
            "EPIC",
            [("id", 5), ("name", 12), ("description", 27), ("status", 13)],
            [[str(self.epic_id), epic.name, epic.description, epic.status.label]],
        ))
        self.console.print()

        rows = [
            [str(story_id), state.stories[story_id].name, state.stories[story_id].status.label]
            for story_id in sorted(epic.stories)
            if story_id in state.stories
        ]
        self.console.print(build_table("STORIES", [("id", 11), ("name", 32), ("status", 17)], rows))
        self.console.print()
        self.console.print(EPIC_HINT, markup=False, emoji=False, highlight=False)

    def interpret(self, raw: str) -> Action | None:
        if raw == "p":
            return NavigateToPreviousPage()
        if raw == "u":
            return UpdateEpicStatus(epic_id=self.epic_id)
        if raw == "d":
            return DeleteEpic(epic_id=self.epic_id)
        if raw == "c":
            return CreateStory(epic_id=self.epic_id)

        story_id = parse_id(raw)
        if story_id is None:
            return None

        if story_id in self.store.read().stories:
            return NavigateToStoryDetail(epic_id=self.epic_id, story_id=story_id)
        return None

    def __repr__(self) -> str:
        return f"EpicDetail(epic_id={self.epic_id})"


class StoryDetail(Page):
    """One story."""

    def __init__(self, store: Store, epic_id: int, story_id: int, console: Console | None = None):
        super().__init__(store, console)
        self.epic_id = epic_id
        self.story_id = story_id

    def render(self) -> None:
        state = self.store.read()
        if self.epic_id not in state.epics:
            raise ScreenStale("StoryDetail", "epic", self.epic_id)
        story = state.stories.get(self.story_id)
        if story is None:
            raise ScreenStale("StoryDetail", "story", self.story_id)

        self.console.print(build_table(
            "STORY",
            [("id", 5), ("name", 12), ("description", 27), ("status", 13)],
            [[str(self.story_id), story.name, story.description, story.status.label]],
        ))
        self.console.print()
        self.console.print(STORY_HINT, markup=False, emoji=False, highlight=False)

    def interpret(self, raw: str) -> Action | None:
        if raw == "p":
            return NavigateToPreviousPage()
        if raw == "u":
            return UpdateStoryStatus(story_id=self.story_id)
        if raw == "d":
            return DeleteStory(epic_id=self.epic_id, story_id=self.story_id)
        return None

    def __repr__(self) -> str:
        return f"StoryDetail(epic_id={self.epic_id}, story_id={self.story_id})"
