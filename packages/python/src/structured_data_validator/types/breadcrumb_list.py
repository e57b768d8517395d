from __future__ import annotations
import re
from typing import Any, Optional

from structured_data_validator.base import BaseRuleSet
from structured_data_validator.checks import is_absolute_url, is_number, is_object
from structured_data_validator.issues import WARNING, Issue, PathSegment

# Relative breadcrumb URLs accepted from microdata and RDFa markup.
_RELATIVE_PATH_RE = re.compile(r"^/[a-z0-9\-/]+$")


class BreadcrumbListRuleSet(BaseRuleSet):
    def get_conditions(self, entity):
        return [
            self.required("itemListElement", "arrayOrObject"),
            self.at_least_two_items,
            self.item_urls,
        ]

    def at_least_two_items(self, entity: dict[str, Any]) -> Optional[Issue]:
        items = entity.get("itemListElement")
        if (isinstance(items, list) and len(items) < 2) or is_object(items):
            return self.issue(
                "At least two ListItems are required", WARNING, ["itemListElement"],
            )
        return None

    def item_urls(self, entity: dict[str, Any]) -> list[Issue]:
        """Every item but the last needs a URL; any URL given must be valid.

        The last item is the one with the highest numeric ``position``.
        When some position is not numeric no item counts as last.
        """
        element = entity.get("itemListElement")
        if not element:
            return []
        if isinstance(element, list):
            items = list(element)
        elif is_object(element):
            items = [element]
        else:
            return []

        positions = [i.get("position") if isinstance(i, dict) else None for i in items]
        last_item = None
        if all(is_number(p) for p in positions):
            last_item = items[max(range(len(items)), key=lambda k: (float(positions[k]), -k))]

        issues = []
        for index, item in enumerate(items):
            if not isinstance(item, dict):
                item = {}
            segment = PathSegment(
                type=item.get("@type") or "ListItem",
                index=index,
                length=len(items),
                property="itemListElement",
            )
            url, url_field = self._item_url(item)
            if url is None and item is last_item:
                continue
            message = self._url_problem(url, url_field)
            if message:
                issues.append(self.issue(
                    message, WARNING, [url_field or "item"],
                    path=(*self.path, segment),
                ))
        return issues

    @staticmethod
    def _item_url(item: dict[str, Any]) -> tuple[Any, Optional[str]]:
        target = item.get("item")
        if is_object(target):
            return target.get("@id") or None, "item.@id"
        if target:
            return target, "item"
        return None, None

    def _url_problem(self, url: Any, url_field: Optional[str]) -> Optional[str]:
        if not url:
            return 'Field "item" with URL is missing'
        invalid = f'Invalid URL in field "{url_field}"'
        if not isinstance(url, str):
            return invalid

        if url.startswith(("http://", "https://")) or self.data_format == "jsonld":
            return None if is_absolute_url(url) else invalid

        if url == "/" and self.data_format == "microdata":
            return None
        if self.data_format in ("rdfa", "microdata"):
            bare = url.split("?")[0].split("#")[0]
            if not _RELATIVE_PATH_RE.match(bare):
                return invalid
        return None
