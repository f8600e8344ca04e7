"""
Data models for epicboard.

Epics, stories and the aggregate state that is persisted as one unit,
plus the actions (intents) pages hand to the navigator.
"""

from dataclasses import dataclass, field
from enum import Enum


class Status(Enum):
    """Lifecycle status shared by epics and stories.

    Values are the tags used in the store file.
    """

    OPEN = "Open"
    IN_PROGRESS = "InProgress"
    RESOLVED = "Resolved"
    CLOSED = "Closed"

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]

    def __str__(self) -> str:
        return self.label


STATUS_LABELS = {
    Status.OPEN: "Open",
    Status.IN_PROGRESS: "In Progress",
    Status.RESOLVED: "Resolved",
    Status.CLOSED: "Closed",
}


@dataclass
class Epic:
    """Top-level work item. `stories` holds ids into DBState.stories."""
    name: str
    description: str
    status: Status = Status.OPEN
    stories: list[int] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "status": self.status.value,
            "stories": list(self.stories),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Epic":
        return cls(
            name=data["name"],
            description=data["description"],
            status=Status(data["status"]),
            stories=list(data["stories"]),
        )


@dataclass
class Story:
    """Leaf work item. Ownership lives only in the parent epic's list."""
    name: str
    description: str
    status: Status = Status.OPEN

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Story":
        return cls(
            name=data["name"],
            description=data["description"],
            status=Status(data["status"]),
        )


@dataclass
class DBState:
    """Everything in the store: id counter plus both entity maps.

    Epics and stories share one id space; `last_item_id` is always >= every
    id in either map.
    """
    last_item_id: int = 0
    epics: dict[int, Epic] = field(default_factory=dict)
    stories: dict[int, Story] = field(default_factory=dict)

    def next_id(self) -> int:
        return self.last_item_id + 1

    def to_dict(self) -> dict:
        # JSON object keys are strings
        return {
            "last_item_id": self.last_item_id,
            "epics": {str(k): v.to_dict() for k, v in self.epics.items()},
            "stories": {str(k): v.to_dict() for k, v in self.stories.items()},
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DBState":
        """Build state from an already schema-validated dict."""
        return cls(
            last_item_id=data["last_item_id"],
            epics={int(k): Epic.from_dict(v) for k, v in data["epics"].items()},
            stories={int(k): Story.from_dict(v) for k, v in data["stories"].items()},
        )


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Action:
    """Base for parsed user actions. str() gives the variant name."""

    def __str__(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class NavigateToEpicDetail(Action):
    epic_id: int


@dataclass(frozen=True)
class NavigateToStoryDetail(Action):
    epic_id: int
    story_id: int


@dataclass(frozen=True)
class NavigateToPreviousPage(Action):
    pass


@dataclass(frozen=True)
class CreateEpic(Action):
    pass


@dataclass(frozen=True)
class UpdateEpicStatus(Action):
    epic_id: int


@dataclass(frozen=True)
class DeleteEpic(Action):
    epic_id: int


@dataclass(frozen=True)
class CreateStory(Action):
    epic_id: int


@dataclass(frozen=True)
class UpdateStoryStatus(Action):
    story_id: int


@dataclass(frozen=True)
class DeleteStory(Action):
    epic_id: int
    story_id: int


@dataclass(frozen=True)
class Exit(Action):
    pass
