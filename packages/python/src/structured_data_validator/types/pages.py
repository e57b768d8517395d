"""Rule-sets for page-level types."""

from __future__ import annotations

from structured_data_validator.base import BaseRuleSet


class FAQPageRuleSet(BaseRuleSet):
    def get_conditions(self, entity):
        return [self.required("mainEntity", "arrayOrObject")]


class QAPageRuleSet(BaseRuleSet):
    def get_conditions(self, entity):
        return [
            self.required("mainEntity"),
            self.required("mainEntity.answerCount"),
        ]


class WebSiteRuleSet(BaseRuleSet):
    def get_conditions(self, entity):
        return [
            self.required("name"),
            self.required("url", "url"),

            self.recommended("alternateName"),
        ]
