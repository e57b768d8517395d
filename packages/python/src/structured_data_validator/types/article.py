from __future__ import annotations

from structured_data_validator.base import BaseRuleSet


class ArticleRuleSet(BaseRuleSet):
    """Article, BlogPosting and NewsArticle."""

    def get_conditions(self, entity):
        return [
            self.required("headline"),

            self.recommended("author", "arrayOrObject"),
            self.recommended("dateModified", "date"),
            self.recommended("datePublished", "date"),
            self.recommended("image", "arrayOrObject"),
            self.recommended("publisher", "object"),
        ]
