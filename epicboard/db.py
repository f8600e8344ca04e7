"""
Store for epicboard.

Backends know how to read and write the whole DBState. Store composes them
into the create/update/delete operations: every operation is one full read,
an in-memory change, and one full write.
"""

import contextlib
import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

from epicboard.errors import CorruptState, EpicNotFound, StoreUnavailable, StoryNotFound
from epicboard.lib.validate import ValidationError, validate, validate_before_write
from epicboard.models import DBState, Epic, Status, Story

logger = logging.getLogger(__name__)

SCHEMA_NAME = "db"


class Database(ABC):
    """Read-full / write-full access to a backing medium."""

    @abstractmethod
    def read(self) -> DBState:
        pass

    @abstractmethod
    def write(self, state: DBState) -> None:
        pass


class JSONFileBackend(Database):
    """DBState stored as a single JSON document on disk."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def initialize(self) -> None:
        """Write an empty state, creating parent directories as needed."""
        self.write(DBState())
        logger.info(f"[STORE] Initialized empty store at {self.path}")

    def read(self) -> DBState:
        """
        Load and validate the store file.

        Raises:
            StoreUnavailable: If the file can't be opened
            CorruptState: If content is not JSON, doesn't match the schema, or holds
                an id above last_item_id
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StoreUnavailable(self.path, e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise CorruptState(f"Store file is not valid UTF-8: {e}", self.path) from None

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CorruptState(f"Invalid JSON: {e}", self.path) from None

        try:
            validate(data, SCHEMA_NAME)
        except ValidationError as e:
            raise CorruptState(str(e), self.path) from None

        state = DBState.from_dict(data)
        highest = max([*state.epics, *state.stories], default=0)
        if highest > state.last_item_id:
            raise CorruptState(
                f"last_item_id {state.last_item_id} is below stored id {highest}", self.path
            )
        return state

    def write(self, state: DBState) -> None:
        """
        Replace the store file with `state`.

        Content goes to a temp file in the same directory first and is renamed
        over the target, so readers see either the old or the new document.

        Raises:
            CorruptState: If the state would not pass schema validation
            StoreUnavailable: If the file can't be written
        """
        data = state.to_dict()
        validate_before_write(data, SCHEMA_NAME, self.path)
        payload = json.dumps(data, indent=2) + "\n"

        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
            raise StoreUnavailable(self.path, e.strerror or str(e)) from e


class MemoryBackend(Database):
    """In-process backend used by tests. Holds a private copy of the state."""

    def __init__(self, state: DBState | None = None):
        self._data = (state or DBState()).to_dict()
        self.write_count = 0

    def read(self) -> DBState:
        return DBState.from_dict(self._data)

    def write(self, state: DBState) -> None:
        self._data = state.to_dict()
        self.write_count += 1


class Store:
    """High-level operations over a backend.

    The navigator and every page share one Store instance.
    """

    def __init__(self, backend: Database):
        self.backend = backend

    def read(self) -> DBState:
        return self.backend.read()

    def create_epic(self, epic: Epic) -> int:
        state = self.read()
        new_id = state.next_id()

        state.epics[new_id] = epic
        state.last_item_id = new_id
        self.backend.write(state)

        logger.info(f"[STORE] Created epic {new_id}")
        return new_id

    def create_story(self, story: Story, epic_id: int) -> int:
        state = self.read()
        epic = state.epics.get(epic_id)
        if epic is None:
            raise EpicNotFound(epic_id)

        new_id = state.next_id()
        state.stories[new_id] = story
        epic.stories.append(new_id)
        state.last_item_id = new_id
        self.backend.write(state)

        logger.info(f"[STORE] Created story {new_id} in epic {epic_id}")
        return new_id

    def delete_epic(self, epic_id: int) -> None:
        """Delete an epic and every story it lists. Ids are never reused."""
        state = self.read()
        epic = state.epics.get(epic_id)
        if epic is None:
            raise EpicNotFound(epic_id)

        for story_id in epic.stories:
            state.stories.pop(story_id, None)
        del state.epics[epic_id]
        self.backend.write(state)

        logger.info(f"[STORE] Deleted epic {epic_id} with {len(epic.stories)} story(s)")

    def update_epic_status(self, epic_id: int, status: Status) -> None:
        state = self.read()
        epic = state.epics.get(epic_id)
        if epic is None:
            raise EpicNotFound(epic_id)

        epic.status = status
        self.backend.write(state)

        logger.info(f"[STORE] Epic {epic_id} status -> {status.value}")

    def update_story_status(self, story_id: int, status: Status) -> None:
        state = self.read()
        story = state.stories.get(story_id)
        if story is None:
            raise StoryNotFound(story_id)

        story.status = status
        self.backend.write(state)

        logger.info(f"[STORE] Story {story_id} status -> {status.value}")

    def delete_story(self, epic_id: int, story_id: int) -> None:
        state = self.read()
        epic = state.epics.get(epic_id)
        if epic is None:
            raise EpicNotFound(epic_id)

        if story_id in epic.stories:
            epic.stories.remove(story_id)
        else:
            logger.warning(f"[STORE] Story {story_id} not listed in epic {epic_id}")

        if state.stories.pop(story_id, None) is None:
            logger.warning(f"[STORE] Story {story_id} already missing from store")

        self.backend.write(state)

        logger.info(f"[STORE] Deleted story {story_id} from epic {epic_id}")
