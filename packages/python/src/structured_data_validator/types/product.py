from __future__ import annotations
from typing import Any

from structured_data_validator.base import BaseRuleSet
from structured_data_validator.issues import ERROR, WARNING, Issue


def _note_count(notes: Any) -> int:
    if not isinstance(notes, dict):
        return 0
    elements = notes.get("itemListElement")
    return len(elements) if isinstance(elements, list) else 0


class ProductRuleSet(BaseRuleSet):
    def get_conditions(self, entity):
        return [
            self.required("name"),
            self.rating_review_or_offers,
            self.notes_count,
        ]

    def rating_review_or_offers(self, entity: dict[str, Any]) -> list[Issue]:
        """One of aggregateRating, offers or review is required.

        A product with offers but without ratings or reviews gets a
        recommendation for each missing one.
        """
        issues = []
        rating = entity.get("aggregateRating")
        offers = entity.get("offers")
        review = entity.get("review")

        if not rating and not offers and not review:
            issues.append(self.issue(
                'One of the following attributes is required: '
                '"aggregateRating", "offers" or "review"',
                ERROR,
                ["aggregateRating", "offers", "review"],
            ))

        if offers and (not rating or not review):
            for field in ("aggregateRating", "review"):
                issue = self.recommended(field, "object")(entity)
                if issue:
                    issues.append(issue)
        return issues

    def notes_count(self, entity: dict[str, Any]) -> list[Issue]:
        """Pros and cons are optional, but a single note is not enough."""
        reviews = entity.get("review")
        if not reviews:
            return []
        if not isinstance(reviews, list):
            reviews = [reviews]

        notes = 0
        for review in reviews:
            if isinstance(review, dict):
                notes += _note_count(review.get("positiveNotes"))
                notes += _note_count(review.get("negativeNotes"))

        if notes == 1:
            return [self.issue(
                "At least 2 notes, either positive or negative, are required",
                WARNING,
                ["review.positiveNotes", "review.negativeNotes"],
            )]
        return []
