from __future__ import annotations
from typing import Any, Optional

from structured_data_validator.base import BaseRuleSet, is_missing
from structured_data_validator.issues import WARNING, Issue


class DefinedRegionRuleSet(BaseRuleSet):
    def get_conditions(self, entity):
        return [
            self.required("addressCountry"),
            self.region_or_postal_code,
        ]

    def region_or_postal_code(self, entity: dict[str, Any]) -> Optional[Issue]:
        if is_missing(entity.get("addressRegion")) or is_missing(entity.get("postalCode")):
            return None
        return self.issue(
            "Only one of addressRegion or postalCode can be used",
            WARNING,
            ["addressRegion", "postalCode"],
        )
