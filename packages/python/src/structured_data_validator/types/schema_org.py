"""Global rule-set checking entities against the schema.org vocabulary."""

from __future__ import annotations
from typing import Any, Optional

from structured_data_validator.base import BaseRuleSet
from structured_data_validator.issues import ERROR, WARNING, Issue
from structured_data_validator.vocabulary import short_name

ERROR_TYPE = "schemaOrg"


class SchemaOrgRuleSet(BaseRuleSet):
    """Flag unknown types and properties the vocabulary does not define.

    Runs once per type of a node.  Property warnings are reported only
    for the node's first known type, so a multi-typed node is not warned
    about the same property twice; a property is accepted if any of the
    node's known types supports it.
    """

    def get_conditions(self, entity):
        if self.vocabulary is None:
            return []
        return [self.known_type, self.supported_properties]

    def known_type(self, entity: dict[str, Any]) -> Optional[Issue]:
        if self.vocabulary.has_class(self.type):
            return None
        return self.issue(
            f'Type "{short_name(self.type)}" is not a valid schema.org type',
            ERROR,
            ["@type"],
            field_name="@type",
            error_type=ERROR_TYPE,
        )

    def supported_properties(self, entity: dict[str, Any]) -> list[Issue]:
        vocabulary = self.vocabulary
        types = entity.get("@type")
        types = types if isinstance(types, list) else [types]
        known = [short_name(t) for t in types if isinstance(t, str) and vocabulary.has_class(t)]
        if not known or known[0] != short_name(self.type):
            return []

        issues = []
        for prop in entity:
            if prop.startswith("@"):
                continue
            name = short_name(prop)
            if any(vocabulary.is_property_of(name, t) for t in known):
                continue
            issues.append(self.issue(
                f'Property "{name}" for type "{known[0]}" is not supported '
                f"by the schema.org specification",
                WARNING,
                [name],
                error_type=ERROR_TYPE,
            ))
        return issues
