from __future__ import annotations

from structured_data_validator.base import BaseRuleSet


class ListItemRuleSet(BaseRuleSet):
    def get_conditions(self, entity):
        return [
            self.or_(self.required("name"), self.required("item.name")),
            self.required("position"),
        ]
