"""Page stack and action handling.

The navigator is the only place where an Action turns into a store mutation
or a change to the page stack. Store errors are not caught here; they reach
the event loop with the stack unchanged (delete pops happen only after the
store call succeeded).
"""

import logging

from rich.console import Console

from epicboard.db import Store
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
from epicboard.ui.pages import EpicDetail, HomePage, Page, StoryDetail
from epicboard.ui.prompts import Prompts

logger = logging.getLogger(__name__)


class Navigator:
    """Owns the page stack. Starts on the home page; an empty stack means stop."""

    def __init__(self, store: Store, prompts: Prompts | None = None, console: Console | None = None):
        self.store = store
        self.console = console or Console()
        self.prompts = prompts or Prompts.interactive(self.console)
        self.pages: list[Page] = [HomePage(self.store, self.console)]

    @property
    def current_page(self) -> Page | None:
        return self.pages[-1] if self.pages else None

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def push_page(self, page: Page) -> None:
        self.pages.append(page)

    def set_prompts(self, prompts: Prompts) -> None:
        self.prompts = prompts

    def _pop(self) -> None:
        if self.pages:
            page = self.pages.pop()
            logger.debug(f"[NAV] Popped {page!r}, {len(self.pages)} page(s) left")

    def handle_action(self, action: Action) -> None:
        """Apply an action to the store and/or the page stack.

        Raises whatever the store raises (EpicNotFound, StoryNotFound,
        StoreUnavailable, CorruptState).
        """
        logger.debug(f"[NAV] Handling {action}")

        if isinstance(action, NavigateToEpicDetail):
            self.push_page(EpicDetail(self.store, action.epic_id, self.console))

        elif isinstance(action, NavigateToStoryDetail):
            self.push_page(StoryDetail(self.store, action.epic_id, action.story_id, self.console))

        elif isinstance(action, NavigateToPreviousPage):
            self._pop()

        elif isinstance(action, CreateEpic):
            epic = self.prompts.create_epic()
            self.store.create_epic(epic)

        elif isinstance(action, UpdateEpicStatus):
            status = self.prompts.update_status()
            if status is not None:
                self.store.update_epic_status(action.epic_id, status)

        elif isinstance(action, DeleteEpic):
            if self.prompts.delete_epic():
                self.store.delete_epic(action.epic_id)
                self._pop()

        elif isinstance(action, CreateStory):
            story = self.prompts.create_story()
            self.store.create_story(story, action.epic_id)

        elif isinstance(action, UpdateStoryStatus):
            status = self.prompts.update_status()
            if status is not None:
                self.store.update_story_status(action.story_id, status)

        elif isinstance(action, DeleteStory):
            if self.prompts.delete_story():
                self.store.delete_story(action.epic_id, action.story_id)
                self._pop()

        elif isinstance(action, Exit):
            self.pages.clear()

        else:
            raise TypeError(f"Unknown action: {action!r}")
