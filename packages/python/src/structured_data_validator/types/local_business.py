from __future__ import annotations

from structured_data_validator.base import BaseRuleSet


class LocalBusinessRuleSet(BaseRuleSet):
    def get_conditions(self, entity):
        return [
            self.required("name"),
            self.required("address"),

            self.recommended("geo", "object"),
            self.recommended("image"),
            self.recommended("openingHoursSpecification"),
            self.recommended("priceRange"),
            self.recommended("telephone"),
            self.recommended("url", "url"),
        ]
