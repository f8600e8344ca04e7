"""
eb run - Interactive epic/story browser.
"""

from rich.console import Console

from epicboard.app import EventLoop, RichTerminal
from epicboard.db import JSONFileBackend, Store
from epicboard.lib.config import AppConfig
from epicboard.navigator import Navigator
from epicboard.ui.prompts import Prompts


def cmd_run(args, config: AppConfig, console: Console | None = None) -> int:
    """Run the interactive session until the user quits or an error stops it."""
    backend = JSONFileBackend(config.db_path)
    if not backend.exists():
        print(f"ERROR: No store at {config.db_path}")
        print("  Create one with: eb init")
        return 2

    console = console or Console()
    store = Store(backend)
    navigator = Navigator(store, Prompts.interactive(console), console)
    loop = EventLoop(navigator, RichTerminal(console))
    return loop.run()
