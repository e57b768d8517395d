from __future__ import annotations
from typing import Any, Optional

from structured_data_validator.base import BaseRuleSet
from structured_data_validator.issues import WARNING, Issue

GTIN_FIELDS = ("gtin", "gtin8", "gtin12", "gtin13", "gtin14", "isbn")


class ProductMerchantRuleSet(BaseRuleSet):
    """Merchant listing requirements layered on top of the Product rules."""

    def get_conditions(self, entity):
        return [
            self.required("image"),
            self.required("offers"),

            self.recommended("audience"),
            self.recommended("brand"),
            self.recommended("color", "string"),
            self.recommended("description", "string"),
            self.recommended("hasCertification"),
            self.recommended("inProductGroupWithID", "string"),
            self.recommended("isVariantOf"),
            self.recommended("material", "string"),
            self.recommended("mpn", "string"),
            self.recommended("pattern", "string"),
            self.recommended("size"),
            self.recommended("sku", "string"),
            self.recommended("subjectOf"),
            self.gtin,
        ]

    def _has_gtin(self, entity: Any, prefix: str = "") -> bool:
        condition = self.or_(*(self.recommended(f"{prefix}{f}", "string") for f in GTIN_FIELDS))
        return condition(entity) is None

    def gtin(self, entity: dict[str, Any]) -> Optional[Issue]:
        """A GTIN is expected on the product itself, its offer, or every offer."""
        if self._has_gtin(entity):
            return None

        offers = entity.get("offers")
        if isinstance(offers, dict) and self._has_gtin(entity, "offers."):
            return None
        if isinstance(offers, list) and offers and all(self._has_gtin(o) for o in offers):
            return None

        names = ", ".join(f'"{f}"' for f in GTIN_FIELDS)
        return self.issue(
            f"Missing one of field {names} on either product or all offers",
            WARNING,
            list(GTIN_FIELDS),
        )
