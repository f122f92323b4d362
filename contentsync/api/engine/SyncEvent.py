"""Engine event kinds."""

from enum import Enum


class SyncEvent(str, Enum):
    """Events the engine reacts to, named after the change-notification vocabulary."""

    ADD = "add"
    CHANGE = "change"
    UNLINK = "unlink"
    ADD_DIR = "addDir"
    UNLINK_DIR = "unlinkDir"
