"""
Boss tracking behaviour settings for Boss Overlay.
"""

from .base import SettingsSection


class TrackerSettings(SettingsSection):
    """What the user may change by hand. Both switches default to off."""

    @property
    def allow_manual_edit_auto_detected(self) -> bool:
        """Whether bosses detected from the save may be toggled manually."""
        return self._get_bool("tracker/allow_manual_edit_auto_detected", False)

    @allow_manual_edit_auto_detected.setter
    def allow_manual_edit_auto_detected(self, value: bool) -> None:
        self._set("tracker/allow_manual_edit_auto_detected", value)

    @property
    def allow_boss_editing(self) -> bool:
        """Whether name, zone and category of catalog bosses may be edited."""
        return self._get_bool("tracker/allow_boss_editing", False)

    @allow_boss_editing.setter
    def allow_boss_editing(self, value: bool) -> None:
        self._set("tracker/allow_boss_editing", value)
