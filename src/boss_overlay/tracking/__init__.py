"""
Module for watching saves and tracking boss progress.
"""

from .differ import find_newly_killed, needing_info
from .watcher import SaveWatcher, UpdateTrigger, WatchState, WatchUpdate
from .zones import ZoneGroup, group_by_zone, progress, format_kill_notification
from .session import TrackerSession

__all__ = [
    "find_newly_killed",
    "needing_info",
    "SaveWatcher",
    "UpdateTrigger",
    "WatchState",
    "WatchUpdate",
    "ZoneGroup",
    "group_by_zone",
    "progress",
    "format_kill_notification",
    "TrackerSession",
]
