"""Tests for the global schema.org conformance rule-set."""

import pytest
from structured_data_validator.base import RuleSetContext
from structured_data_validator.issues import ERROR, WARNING, make_path
from structured_data_validator.types.schema_org import ERROR_TYPE, SchemaOrgRuleSet


@pytest.fixture
def check(vocabulary):
    def run(entity, type_name=None, vocab=vocabulary):
        if type_name is None:
            type_name = entity["@type"] if isinstance(entity["@type"], str) else entity["@type"][0]
        context = RuleSetContext("jsonld", make_path({"type": type_name, "index": 0}), type_name, vocab)
        return SchemaOrgRuleSet(context).validate(entity)
    return run


class TestKnownType:
    def test_without_vocabulary(self, check):
        assert check({"@type": "BananaPhone"}, vocab=None) == []

    def test_known_type(self, check):
        assert check({"@type": "Product", "name": "Phone", "sku": "P-1"}) == []

    def test_full_iri_type(self, check):
        assert check({"@type": "https://schema.org/Product", "name": "Phone"}) == []

    def test_unknown_type(self, check):
        [issue] = check({"@type": "BananaPhone", "name": "ring"})
        assert issue.severity == ERROR
        assert issue.issue_message == 'Type "BananaPhone" is not a valid schema.org type'
        assert issue.field_name == "@type"
        assert issue.field_names == ["@type"]
        assert issue.error_type == ERROR_TYPE

    def test_enumeration_member_is_not_a_type(self, check):
        [issue] = check({"@type": "InStock"})
        assert issue.severity == ERROR


class TestSupportedProperties:
    def test_unsupported_property(self, check):
        [issue] = check({"@type": "Product", "name": "Phone", "price": "10"})
        assert issue.severity == WARNING
        assert issue.issue_message == (
            'Property "price" for type "Product" is not supported by the schema.org specification'
        )
        assert issue.field_names == ["price"]
        assert issue.error_type == ERROR_TYPE

    def test_unknown_property(self, check):
        [issue] = check({"@type": "Brand", "name": "Acme", "slogan2": "x"})
        assert issue.field_names == ["slogan2"]

    def test_inherited_property(self, check):
        entity = {"@type": "Restaurant", "name": "Dave's", "address": "NYC", "servesCuisine": "Steak"}
        assert check(entity) == []

    def test_keywords_skipped(self, check):
        assert check({"@type": "Product", "@id": "#p", "@context": "https://schema.org"}) == []

    def test_prefixed_property(self, check):
        assert check({"@type": "Product", "schema:name": "Phone"}) == []

    def test_multi_typed_node_reports_once(self, check):
        entity = {"@type": ["Product", "Offer"], "price": "10", "sku": "P-1", "colour": "red"}
        first = check(entity, "Product")
        second = check(entity, "Offer")
        assert [i.field_names for i in first] == [["colour"]]
        assert second == []

    def test_unknown_type_alongside_known_type(self, check):
        entity = {"@type": ["BananaPhone", "Product"], "name": "Phone", "colour": "red"}
        unknown = check(entity, "BananaPhone")
        known = check(entity, "Product")
        assert [i.field_name for i in unknown] == ["@type"]
        assert [i.field_names for i in known] == [["colour"]]
