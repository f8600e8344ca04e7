"""
eb init - Create an empty store file.
"""

from epicboard.db import JSONFileBackend
from epicboard.errors import StoreUnavailable
from epicboard.lib.config import AppConfig


def cmd_init(args, config: AppConfig) -> int:
    """Create an empty store, refusing to overwrite one unless --force."""
    backend = JSONFileBackend(config.db_path)

    if backend.exists() and not args.force:
        print(f"ERROR: Store already exists at {config.db_path}")
        print("  Use --force to replace it with an empty store.")
        return 1

    try:
        backend.initialize()
    except StoreUnavailable as e:
        print(f"ERROR: {e}")
        return 2

    print(f"Initialized empty store at {config.db_path}")
    return 0
