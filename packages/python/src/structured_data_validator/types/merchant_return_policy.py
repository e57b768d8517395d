from __future__ import annotations
from typing import Any, Optional

from structured_data_validator.base import BaseRuleSet
from structured_data_validator.issues import ERROR, Issue

FINITE_WINDOW = "MerchantReturnFiniteReturnWindow"
UNLIMITED_WINDOW = "MerchantReturnUnlimitedWindow"
SHIPPING_FEES = "ReturnShippingFees"

# Recommended only for a policy given on an Organization via hasMerchantReturnPolicy.
ORGANIZATION_FIELDS = (
    "customerRemorseReturnFees",
    "customerRemorseReturnLabelSource",
    "customerRemorseReturnShippingFeesAmount",
    "itemCondition",
    "itemDefectReturnFees",
    "itemDefectReturnLabelSource",
    "itemDefectReturnShippingFeesAmount",
    "refundType",
    "restockingFee",
    "returnLabelSource",
    "returnPolicyCountry",
)


def _mentions(value: Any, name: str) -> bool:
    """True if an enumeration value (or any of a list of them) names *name*."""
    if isinstance(value, str):
        return name in value
    if isinstance(value, list):
        return any(isinstance(v, str) and name in v for v in value)
    return False


class MerchantReturnPolicyRuleSet(BaseRuleSet):
    def get_conditions(self, entity):
        conditions = [self.country_or_link]

        category = entity.get("returnPolicyCategory")
        if _mentions(category, FINITE_WINDOW) or _mentions(category, UNLIMITED_WINDOW):
            if _mentions(category, FINITE_WINDOW):
                conditions.append(self.recommended("merchantReturnDays", "number"))
            conditions += [
                self.recommended("returnFees"),
                self.recommended("returnMethod"),
            ]
            if _mentions(entity.get("returnFees"), SHIPPING_FEES):
                conditions.append(self.recommended("returnShippingFeesAmount"))

            # TODO: also apply to Organization subtypes such as OnlineStore
            if self._on_organization():
                conditions += [self.recommended(f) for f in ORGANIZATION_FIELDS]

        return conditions

    def _on_organization(self) -> bool:
        return self.in_type("Organization") and self.in_property("hasMerchantReturnPolicy")

    def country_or_link(self, entity: dict[str, Any]) -> Optional[Issue]:
        if self._on_organization() and self.required("merchantReturnLink")(entity) is None:
            return None
        if (
            self.required("applicableCountry")(entity) is None
            and self.required("returnPolicyCategory")(entity) is None
        ):
            return None
        return self.issue(
            "Either applicableCountry and returnPolicyCategory or "
            "merchantReturnLink must be present",
            ERROR,
            ["applicableCountry", "returnPolicyCategory", "merchantReturnLink"],
        )
