from __future__ import annotations

from structured_data_validator.base import BaseRuleSet


class OfferRuleSet(BaseRuleSet):
    """Offer requirements apply to offers listed on a Product only."""

    def get_conditions(self, entity):
        if not self.in_type("Product"):
            return []
        return [
            self.or_(
                self.required("price"),
                self.required("priceSpecification.price"),
            ),
            self.or_(
                self.recommended("priceCurrency"),
                self.recommended("priceSpecification.priceCurrency"),
            ),
            self.recommended("availability"),
            self.recommended("priceValidUntil", "date"),
        ]


class AggregateOfferRuleSet(BaseRuleSet):
    def get_conditions(self, entity):
        return [
            self.required("lowPrice"),
            self.required("priceCurrency"),

            self.recommended("highPrice"),
            self.recommended("offerCount"),
        ]
