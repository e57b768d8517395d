from __future__ import annotations
from typing import Any, Optional

from structured_data_validator.base import BaseRuleSet
from structured_data_validator.checks import is_number
from structured_data_validator.issues import ERROR, Issue

DEFAULT_WORST = 0
DEFAULT_BEST = 5


def _bound(value: Any, default: float) -> Optional[float]:
    if not value:
        return default
    return float(value) if is_number(value) else None


class RatingRuleSet(BaseRuleSet):
    def get_conditions(self, entity):
        return [
            self.required("ratingValue"),
            self.rating_range,

            # Documented as recommended; search engines assume 0 and 5 when absent.
            self.recommended("bestRating"),
            self.recommended("worstRating"),
        ]

    def rating_range(self, entity: dict[str, Any]) -> Optional[Issue]:
        """Numeric ratings must lie within [worstRating, bestRating].

        Text ratings ("85%", "4/5") are not range checked.
        """
        value = entity.get("ratingValue")
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        low = _bound(entity.get("worstRating"), DEFAULT_WORST)
        high = _bound(entity.get("bestRating"), DEFAULT_BEST)
        if low is None or high is None:
            return None
        if value < low or value > high:
            return self.issue(
                "Rating is outside the specified or default range",
                ERROR,
                ["ratingValue"],
            )
        return None


class AggregateRatingRuleSet(RatingRuleSet):
    def get_conditions(self, entity):
        return [
            *super().get_conditions(entity),
            self.or_(
                self.required("ratingCount"),
                self.required("reviewCount"),
            ),
        ]
