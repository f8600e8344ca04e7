"""epicboard - a terminal issue tracker for epics and stories."""

__version__ = "0.1.0"
