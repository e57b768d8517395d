"""Tests for the MerchantReturnPolicy rule-set."""

from structured_data_validator.base import RuleSetContext
from structured_data_validator.issues import ERROR, WARNING, make_path
from structured_data_validator.types.merchant_return_policy import (
    ORGANIZATION_FIELDS,
    MerchantReturnPolicyRuleSet,
)

ON_OFFER = make_path(
    {"type": "Product", "index": 0},
    {"type": "Offer", "property": "offers"},
    {"type": "MerchantReturnPolicy", "property": "hasMerchantReturnPolicy"},
)
ON_ORGANIZATION = make_path(
    {"type": "Organization", "index": 0},
    {"type": "MerchantReturnPolicy", "property": "hasMerchantReturnPolicy"},
)

FINITE = "https://schema.org/MerchantReturnFiniteReturnWindow"


def validate(entity, path=ON_OFFER):
    context = RuleSetContext("jsonld", path, "MerchantReturnPolicy")
    return MerchantReturnPolicyRuleSet(context).validate(entity)


def fields(issues):
    return [i.field_names for i in issues]


class TestCountryOrLink:
    def test_nothing_given(self):
        [issue] = validate({})
        assert issue.severity == ERROR
        assert issue.field_names == ["applicableCountry", "returnPolicyCategory", "merchantReturnLink"]

    def test_link_only_on_organization(self):
        assert validate({"merchantReturnLink": "https://example.com/returns"}, ON_ORGANIZATION) == []

    def test_link_not_enough_on_offer(self):
        [issue] = validate({"merchantReturnLink": "https://example.com/returns"})
        assert issue.severity == ERROR

    def test_country_without_category(self):
        [issue] = validate({"applicableCountry": "DE"})
        assert issue.severity == ERROR


class TestReturnWindow:
    def test_finite_window(self):
        issues = validate({"applicableCountry": "DE", "returnPolicyCategory": FINITE})
        assert fields(issues) == [["merchantReturnDays"], ["returnFees"], ["returnMethod"]]
        assert all(i.severity == WARNING for i in issues)

    def test_finite_window_complete(self):
        entity = {
            "applicableCountry": ["DE", "AT"],
            "returnPolicyCategory": FINITE,
            "merchantReturnDays": 30,
            "returnFees": "https://schema.org/FreeReturn",
            "returnMethod": "https://schema.org/ReturnByMail",
        }
        assert validate(entity) == []

    def test_return_days_must_be_numeric(self):
        entity = {
            "applicableCountry": "DE",
            "returnPolicyCategory": FINITE,
            "merchantReturnDays": "a month",
            "returnFees": "FreeReturn",
            "returnMethod": "ReturnByMail",
        }
        [issue] = validate(entity)
        assert issue.issue_message == 'Invalid type for attribute "merchantReturnDays"'

    def test_unlimited_window_has_no_days(self):
        entity = {
            "applicableCountry": "DE",
            "returnPolicyCategory": "MerchantReturnUnlimitedWindow",
        }
        assert fields(validate(entity)) == [["returnFees"], ["returnMethod"]]

    def test_not_permitted_has_no_recommendations(self):
        entity = {"applicableCountry": "DE", "returnPolicyCategory": "MerchantReturnNotPermitted"}
        assert validate(entity) == []

    def test_shipping_fees_amount(self):
        entity = {
            "applicableCountry": "DE",
            "returnPolicyCategory": [FINITE],
            "merchantReturnDays": 14,
            "returnFees": "https://schema.org/ReturnShippingFees",
            "returnMethod": "ReturnByMail",
        }
        assert fields(validate(entity)) == [["returnShippingFeesAmount"]]

    def test_organization_fields(self):
        entity = {
            "applicableCountry": "DE",
            "returnPolicyCategory": FINITE,
            "merchantReturnDays": 14,
            "returnFees": "FreeReturn",
            "returnMethod": "ReturnByMail",
        }
        assert fields(validate(entity, ON_ORGANIZATION)) == [[f] for f in ORGANIZATION_FIELDS]
