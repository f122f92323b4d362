"""API module for contentsync.

Functions defined here are the single source of truth for the CLI commands
and for the host integration hook.
"""

__all__ = []
