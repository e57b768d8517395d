"""
Example 02: Custom Rule-Sets and the schema.org Vocabulary
===========================================================

Demonstrates registering a rule-set for a new type and loading a
schema.org vocabulary so subtypes inherit rules and unknown types and
properties are reported.

Use case: Enforcing house rules for recipe pages.
"""

import sys
from pathlib import Path

from structured_data_validator import (
    ERROR,
    WARNING,
    BaseRuleSet,
    Validator,
    VocabularyGraph,
)

# ── 1. A rule-set for Recipe ─────────────────────────────────────

print("=== 1. Recipe Rule-Set ===\n")


class RecipeRuleSet(BaseRuleSet):
    def get_conditions(self, entity):
        return [
            self.required("name"),
            self.required("image", "arrayOrObject"),
            self.or_(
                self.recommended("totalTime", "duration"),
                self.recommended("cookTime", "duration"),
            ),
            self.recommended("recipeYield"),
            self.short_description,
        ]

    def short_description(self, entity):
        description = entity.get("description")
        if isinstance(description, str) and len(description) > 160:
            return self.issue("Description is longer than 160 characters", WARNING, ["description"])
        return None


validator = Validator()
validator.register("Recipe", RecipeRuleSet)

recipe = {
    "@type": "Recipe",
    "name": "Pancakes",
    "image": "https://example.com/pancakes.jpg",
    "cookTime": "PT20",
    "description": "Fluffy. " * 30,
}
for issue in validator.validate({"jsonld": {"Recipe": [recipe]}}):
    print(f"  [{issue.severity}] {issue.field_names}: {issue.issue_message}")

# ── 2. Vocabulary-aware validation ───────────────────────────────

print("\n=== 2. With a schema.org Vocabulary ===\n")

# Download schemaorg-current-https.jsonld from https://schema.org/docs/developers.html
vocabulary_file = Path(sys.argv[1]) if len(sys.argv) > 1 else None
if vocabulary_file is None or not vocabulary_file.exists():
    print("Pass the path of a schema.org JSON-LD vocabulary to run this part.")
    sys.exit(0)

vocabulary = VocabularyGraph.from_file(vocabulary_file)
print(f"Loaded {len(vocabulary.classes)} classes")

restaurant = {
    "@type": "Restaurant",
    "name": "Dave's Steak House",
    "servesCuisine": "Steak",
    "michelinStars": 1,
}
issues = Validator(vocabulary).validate({"jsonld": {"Restaurant": [restaurant]}})
for issue in issues:
    print(f"  [{issue.severity}] {issue.field_names}: {issue.issue_message}")

print(f"\nErrors: {sum(i.severity == ERROR for i in issues)}")
