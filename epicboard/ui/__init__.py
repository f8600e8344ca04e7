"""Pages and prompts for the epicboard terminal UI."""

from epicboard.ui.pages import EpicDetail, HomePage, Page, StoryDetail
from epicboard.ui.prompts import Prompts

__all__ = [
    "Page",
    "HomePage",
    "EpicDetail",
    "StoryDetail",
    "Prompts",
]
