"""Tests for epicboard.models module."""

from epicboard.models import (
    DBState,
    DeleteStory,
    Epic,
    Exit,
    NavigateToEpicDetail,
    Status,
    Story,
)


class TestStatus:
    """Tests for the Status enum."""

    def test_values_are_store_tags(self):
        assert [s.value for s in Status] == ["Open", "InProgress", "Resolved", "Closed"]

    def test_labels(self):
        assert Status.IN_PROGRESS.label == "In Progress"
        assert str(Status.CLOSED) == "Closed"


class TestEntities:
    """Tests for Epic and Story."""

    def test_new_epic_defaults(self):
        epic = Epic("name", "description")
        assert epic.status == Status.OPEN
        assert epic.stories == []

    def test_new_story_defaults(self):
        assert Story("name", "description").status == Status.OPEN

    def test_epic_dict_uses_status_tag(self):
        epic = Epic("E", "d", Status.IN_PROGRESS, [2, 3])
        assert epic.to_dict() == {
            "name": "E",
            "description": "d",
            "status": "InProgress",
            "stories": [2, 3],
        }

    def test_epic_from_dict_copies_story_list(self):
        data = {"name": "E", "description": "", "status": "Resolved", "stories": [4]}
        epic = Epic.from_dict(data)
        epic.stories.append(5)
        assert data["stories"] == [4]
        assert epic.status == Status.RESOLVED


class TestDBState:
    """Tests for the aggregate state."""

    def test_empty_state(self):
        state = DBState()
        assert state.last_item_id == 0
        assert state.next_id() == 1
        assert state.to_dict() == {"last_item_id": 0, "epics": {}, "stories": {}}

    def test_keys_are_stringified(self):
        state = DBState(
            last_item_id=2,
            epics={1: Epic("E", "", stories=[2])},
            stories={2: Story("S", "")},
        )
        data = state.to_dict()
        assert list(data["epics"]) == ["1"]
        assert list(data["stories"]) == ["2"]

    def test_from_dict_restores_int_keys(self):
        state = DBState(
            last_item_id=2,
            epics={1: Epic("E", "", Status.CLOSED, [2])},
            stories={2: Story("S", "x", Status.IN_PROGRESS)},
        )
        assert DBState.from_dict(state.to_dict()) == state


class TestActions:
    """Tests for action values."""

    def test_equality_by_fields(self):
        assert NavigateToEpicDetail(epic_id=1) == NavigateToEpicDetail(epic_id=1)
        assert NavigateToEpicDetail(epic_id=1) != NavigateToEpicDetail(epic_id=2)

    def test_str_is_variant_name(self):
        assert str(DeleteStory(epic_id=1, story_id=2)) == "DeleteStory"
        assert str(Exit()) == "Exit"
