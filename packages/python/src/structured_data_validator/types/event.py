from __future__ import annotations
from typing import Any, Optional

from structured_data_validator.base import BaseRuleSet
from structured_data_validator.issues import ERROR, Issue

_ONLINE_MODES = ("OnlineEventAttendanceMode", "MixedEventAttendanceMode")


class EventRuleSet(BaseRuleSet):
    def get_conditions(self, entity):
        return [
            self.required("name"),
            self.required("startDate", "date"),
            self.location_or_attendance_mode,

            self.recommended("description"),
            self.recommended("endDate", "date"),
            self.recommended("eventAttendanceMode"),
            self.recommended("eventStatus"),
            self.recommended("image", "arrayOrObject"),
            self.recommended("offers", "arrayOrObject"),
            self.recommended("organizer", "object"),
            self.recommended("performer", "arrayOrObject"),
        ]

    def location_or_attendance_mode(self, entity: dict[str, Any]) -> Optional[Issue]:
        """Physical events need a location; online and mixed events may omit it."""
        if entity.get("location") is not None:
            return None
        modes = entity.get("eventAttendanceMode")
        if isinstance(modes, str):
            modes = [modes]
        if isinstance(modes, list) and any(
            isinstance(mode, str) and online in mode
            for mode in modes for online in _ONLINE_MODES
        ):
            return None
        return self.issue(
            'Either "location" or online "eventAttendanceMode" is required',
            ERROR,
            ["location", "eventAttendanceMode"],
            field_name="location",
        )
