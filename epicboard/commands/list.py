"""
eb list - Print epics and their stories without starting the TUI.
"""

from epicboard.db import JSONFileBackend
from epicboard.errors import CorruptState, StoreUnavailable
from epicboard.lib.config import AppConfig


def cmd_list(args, config: AppConfig) -> int:
    """List epics with their stories."""
    try:
        state = JSONFileBackend(config.db_path).read()
    except (StoreUnavailable, CorruptState) as e:
        print(f"ERROR: {e}")
        return 2

    if not state.epics:
        print("Epics: none")
        print()
        print("Get started:")
        print("  eb run   then [c] to create an epic")
        return 0

    print("Epics")
    print("-" * 60)
    story_count = 0
    for epic_id in sorted(state.epics):
        epic = state.epics[epic_id]
        name = epic.name[:40] + "..." if len(epic.name) > 40 else epic.name
        print(f"  {epic_id:<6} {epic.status.label:<12} {name}")

        for story_id in epic.stories:
            story = state.stories.get(story_id)
            if story is None:
                print(f"    {story_id:<6} [WARN] missing story")
                continue
            story_count += 1
            name = story.name[:36] + "..." if len(story.name) > 36 else story.name
            print(f"    {story_id:<6} {story.status.label:<12} {name}")
    print()

    print(f"{len(state.epics)} epic(s), {story_count} story(s)")
    return 0
