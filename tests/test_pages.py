"""Tests for epicboard.ui.pages and epicboard.ui.helpers."""

import io

import pytest
from rich.console import Console

from epicboard.db import MemoryBackend, Store
from epicboard.errors import NotFound, ScreenStale
from epicboard.models import (
    CreateEpic,
    CreateStory,
    DeleteEpic,
    DeleteStory,
    Epic,
    Exit,
    NavigateToEpicDetail,
    NavigateToPreviousPage,
    NavigateToStoryDetail,
    Status,
    Story,
    UpdateEpicStatus,
    UpdateStoryStatus,
)
from epicboard.ui.helpers import get_column_string
from epicboard.ui.pages import EpicDetail, HomePage, StoryDetail, parse_id

JUNK_INPUTS = ["j983f2j", "q983f2j", "q\n", "1\n", " 1", "+1", "-1", ""]


@pytest.fixture
def store():
    return Store(MemoryBackend())


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120)


def output(console: Console) -> str:
    return console.file.getvalue()


class TestGetColumnString:
    """Tests for get_column_string."""

    def test_pads_short_text(self):
        assert get_column_string("test", 6) == "test  "

    def test_exact_width_unchanged(self):
        assert get_column_string("test", 4) == "test"

    def test_truncates_with_ellipsis(self):
        assert get_column_string("test12345", 7) == "test..."

    def test_narrow_columns_get_dots(self):
        assert get_column_string("test", 3) == "..."
        assert get_column_string("test", 1) == "."

    def test_zero_width(self):
        assert get_column_string("test", 0) == ""


class TestParseId:
    """Tests for parse_id."""

    def test_digits(self):
        assert parse_id("42") == 42

    @pytest.mark.parametrize("raw", JUNK_INPUTS)
    def test_rejects_junk(self, raw):
        assert parse_id(raw) is None

    def test_rejects_non_ascii_digits(self):
        assert parse_id("٣") is None

    def test_rejects_oversized_digit_string(self):
        assert parse_id("9" * 5000) is None


class TestHomePage:
    """Tests for HomePage."""

    def test_render_lists_epics(self, store, console):
        store.create_epic(Epic("First epic", ""))
        second = store.create_epic(Epic("Second epic", ""))
        store.update_epic_status(second, Status.IN_PROGRESS)

        HomePage(store, console).render()

        text = output(console)
        assert "EPICS" in text
        assert "First epic" in text
        assert "In Progress" in text
        assert "[q] quit | [c] create epic | [:id:] navigate to epic" in text

    def test_render_empty_store(self, store, console):
        HomePage(store, console).render()
        assert "EPICS" in output(console)

    def test_render_keeps_brackets_in_names(self, store, console):
        store.create_epic(Epic("[bold]x", ""))
        HomePage(store, console).render()
        assert "[bold]x" in output(console)

    def test_interpret_commands(self, store, console):
        page = HomePage(store, console)
        assert page.interpret("q") == Exit()
        assert page.interpret("c") == CreateEpic()

    def test_interpret_existing_epic(self, store, console):
        epic_id = store.create_epic(Epic("", ""))
        page = HomePage(store, console)
        assert page.interpret(str(epic_id)) == NavigateToEpicDetail(epic_id=epic_id)

    def test_interpret_missing_epic(self, store, console):
        page = HomePage(store, console)
        assert page.interpret("1") is None
        assert page.interpret("999") is None

    @pytest.mark.parametrize("raw", JUNK_INPUTS)
    def test_interpret_junk(self, store, console, raw):
        store.create_epic(Epic("", ""))
        assert HomePage(store, console).interpret(raw) is None

    def test_interpret_story_id_is_not_an_epic(self, store, console):
        epic_id = store.create_epic(Epic("", ""))
        story_id = store.create_story(Story("", ""), epic_id)
        assert HomePage(store, console).interpret(str(story_id)) is None


class TestEpicDetail:
    """Tests for EpicDetail."""

    @pytest.fixture
    def page(self, store, console):
        epic_id = store.create_epic(Epic("My epic", "Epic description"))
        return EpicDetail(store, epic_id, console)

    def test_render(self, page, console):
        page.store.create_story(Story("My story", ""), page.epic_id)
        page.render()
        text = output(console)
        assert "My epic" in text
        assert "Epic description" in text
        assert "My story" in text
        assert "[p] previous | [u] update epic" in text

    def test_render_only_own_stories(self, page, console):
        other = page.store.create_epic(Epic("Other", ""))
        page.store.create_story(Story("Foreign story", ""), other)
        page.render()
        assert "Foreign story" not in output(console)

    def test_render_stale_epic(self, store, console):
        page = EpicDetail(store, 1, console)
        with pytest.raises(ScreenStale) as exc_info:
            page.render()
        assert isinstance(exc_info.value, NotFound)
        assert exc_info.value.entity_id == 1

    def test_interpret_commands(self, page):
        epic_id = page.epic_id
        assert page.interpret("p") == NavigateToPreviousPage()
        assert page.interpret("u") == UpdateEpicStatus(epic_id=epic_id)
        assert page.interpret("d") == DeleteEpic(epic_id=epic_id)
        assert page.interpret("c") == CreateStory(epic_id=epic_id)

    def test_delete_bound_to_own_id_even_when_epic_is_gone(self, store, console):
        page = EpicDetail(store, 42, console)
        assert page.interpret("d") == DeleteEpic(epic_id=42)

    def test_interpret_story(self, page):
        story_id = page.store.create_story(Story("", ""), page.epic_id)
        assert page.interpret(str(story_id)) == NavigateToStoryDetail(
            epic_id=page.epic_id, story_id=story_id
        )

    def test_interpret_any_existing_story(self, page):
        other = page.store.create_epic(Epic("", ""))
        story_id = page.store.create_story(Story("", ""), other)
        assert page.interpret(str(story_id)) == NavigateToStoryDetail(
            epic_id=page.epic_id, story_id=story_id
        )

    def test_interpret_missing_story(self, page):
        assert page.interpret("999") is None

    @pytest.mark.parametrize("raw", JUNK_INPUTS)
    def test_interpret_junk(self, page, raw):
        page.store.create_story(Story("", ""), page.epic_id)
        assert page.interpret(raw) is None


class TestStoryDetail:
    """Tests for StoryDetail."""

    @pytest.fixture
    def page(self, store, console):
        epic_id = store.create_epic(Epic("", ""))
        story_id = store.create_story(Story("My story", "Story description"), epic_id)
        return StoryDetail(store, epic_id, story_id, console)

    def test_render(self, page, console):
        page.render()
        text = output(console)
        assert "STORY" in text
        assert "My story" in text
        assert "Open" in text
        assert "[p] previous | [u] update story | [d] delete story" in text

    def test_render_stale_story(self, store, console):
        epic_id = store.create_epic(Epic("", ""))
        with pytest.raises(ScreenStale):
            StoryDetail(store, epic_id, 99, console).render()

    def test_render_stale_epic(self, page):
        page.store.delete_epic(page.epic_id)
        with pytest.raises(ScreenStale) as exc_info:
            page.render()
        assert exc_info.value.entity == "epic"

    def test_interpret_commands(self, page):
        assert page.interpret("p") == NavigateToPreviousPage()
        assert page.interpret("u") == UpdateStoryStatus(story_id=page.story_id)
        assert page.interpret("d") == DeleteStory(epic_id=page.epic_id, story_id=page.story_id)

    def test_interpret_has_no_numeric_branch(self, page):
        assert page.interpret(str(page.story_id)) is None
        assert page.interpret(str(page.epic_id)) is None

    @pytest.mark.parametrize("raw", JUNK_INPUTS)
    def test_interpret_junk(self, page, raw):
        assert page.interpret(raw) is None
