"""
Error types for epicboard.

Store and pages raise these; only the event loop and the CLI turn them
into user-visible messages.
"""

from pathlib import Path


class EpicboardError(Exception):
    """Base class for all epicboard errors."""
    pass


class StoreUnavailable(EpicboardError):
    """Backing medium could not be opened, read or written."""

    def __init__(self, path: Path | str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Store unavailable at {path}: {reason}")


class CorruptState(EpicboardError):
    """Stored content does not parse into the expected shape."""

    def __init__(self, message: str, path: Path | str | None = None):
        self.path = path
        super().__init__(message + (f" ({path})" if path else ""))


class NotFound(EpicboardError):
    """A referenced id does not resolve against current state."""
    pass


class EpicNotFound(NotFound):
    def __init__(self, epic_id: int):
        self.epic_id = epic_id
        super().__init__(f"Epic with id {epic_id} not found")


class StoryNotFound(NotFound):
    def __init__(self, story_id: int):
        self.story_id = story_id
        super().__init__(f"Story with id {story_id} not found")


class ScreenStale(NotFound):
    """A stacked page is bound to an id that no longer exists."""

    def __init__(self, page: str, entity: str, entity_id: int):
        self.page = page
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{page}: {entity} with id {entity_id} no longer exists")


class ConfigError(EpicboardError):
    """Configuration file or value is malformed."""
    pass
