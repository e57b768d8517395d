"""Structured-data validator.

Walks the ``{jsonld, microdata, rdfa}`` output of a structured-data
extractor, runs the rule-sets registered for every typed entity it finds
(plus the global schema.org rule-set when a vocabulary is configured) and
returns a flat list of issues tagged with their document context.

Issue order is deterministic: formats in ``DATA_FORMATS`` order, root
types and entities in declaration order, then for every node its type
issues (per type, per rule-set) followed by issues from nested
properties, and array elements in index order.
"""

from __future__ import annotations
import json
import logging
from typing import Any, Mapping, Optional, Sequence

from structured_data_validator.base import RuleSetContext, RuleSetFactory
from structured_data_validator.issues import ERROR, Issue, Path, PathSegment
from structured_data_validator.resolver import HandlerResolver
from structured_data_validator.types import DEFAULT_HANDLERS
from structured_data_validator.types.schema_org import SchemaOrgRuleSet
from structured_data_validator.vocabulary import VocabularyGraph

logger = logging.getLogger(__name__)

DATA_FORMATS = ("jsonld", "microdata", "rdfa")


def _declares_type(entity: Mapping[str, Any]) -> bool:
    """A node is typed unless ``@type`` is absent, null, empty text, zero or false.

    An empty ``@type`` list still counts: the node runs no rule-sets but its
    properties are walked.
    """
    t = entity.get("@type")
    return isinstance(t, (list, tuple, dict)) or bool(t)


def _types_of(entity: Mapping[str, Any]) -> list[str]:
    """Type names of *entity*; non-string ``@type`` values name no type."""
    t = entity.get("@type")
    values = t if isinstance(t, (list, tuple)) else [t]
    return [v for v in values if isinstance(v, str) and v]


def _is_nested_entity(value: Any) -> bool:
    """Objects, and non-empty arrays whose first element is an object."""
    if isinstance(value, dict):
        return True
    return isinstance(value, list) and len(value) > 0 and isinstance(value[0], dict)


class Validator:
    """Validate extracted structured data against registered rule-sets.

    Args:
        vocabulary: A :class:`VocabularyGraph` or a raw schema.org JSON-LD
            document.  Enables inheritance fallback and, unless
            *global_handlers* is given, the schema.org conformance rule-set.
        handlers: Type name → rule-set factories.  Defaults to a copy of
            :data:`DEFAULT_HANDLERS`.
        global_handlers: Factories run for every typed node.
        data_formats: Formats read from the document, in order.
    """

    def __init__(
        self,
        vocabulary: VocabularyGraph | Mapping[str, Any] | None = None,
        *,
        handlers: Optional[Mapping[str, Sequence[RuleSetFactory]]] = None,
        global_handlers: Optional[Sequence[RuleSetFactory]] = None,
        data_formats: Sequence[str] = DATA_FORMATS,
    ):
        if vocabulary is not None and not isinstance(vocabulary, VocabularyGraph):
            vocabulary = VocabularyGraph.from_jsonld(vocabulary)
        self.vocabulary: Optional[VocabularyGraph] = vocabulary

        source = DEFAULT_HANDLERS if handlers is None else handlers
        self.handlers: dict[str, list[RuleSetFactory]] = {
            name: list(factories) for name, factories in source.items()
        }
        if global_handlers is None:
            global_handlers = [SchemaOrgRuleSet] if vocabulary is not None else []
        self.global_handlers: list[RuleSetFactory] = list(global_handlers)
        self.data_formats = tuple(data_formats)
        self._resolver = HandlerResolver(self.handlers, self.vocabulary)

    def register(self, type_name: str, *factories: RuleSetFactory) -> None:
        """Replace the rule-sets registered for *type_name* on this instance."""
        self.handlers[type_name] = list(factories)

    # ── Orchestration ────────────────────────────────────────────

    def validate(self, document: Mapping[str, Any]) -> list[Issue]:
        """Validate an extracted document and return all issues.

        ``@location`` is removed from every root entity before it is
        walked and reported on its issues instead.
        """
        if not isinstance(document, Mapping):
            raise TypeError(
                f"Document must be a mapping, got: {type(document).__name__}"
            )

        results: list[Issue] = []
        for data_format in self.data_formats:
            roots = document.get(data_format)
            if not roots:
                continue
            if not isinstance(roots, Mapping):
                raise TypeError(
                    f"{data_format!r} must map root types to entity lists, "
                    f"got: {type(roots).__name__}"
                )
            logger.debug("Validating %s data (%d root types)", data_format, len(roots))

            for root_type, entities in roots.items():
                if not isinstance(entities, (list, tuple)):
                    raise TypeError(
                        f"Entities for {data_format}/{root_type} must be a list, "
                        f"got: {type(entities).__name__}"
                    )
                for index, entity in enumerate(entities):
                    results.extend(
                        self._validate_root(entity, root_type, index, data_format)
                    )

        results.extend(self._extraction_errors(document.get("errors")))
        logger.debug("Validation finished with %d issues", len(results))
        return results

    def _validate_root(
        self, entity: Any, root_type: str, index: int, data_format: str,
    ) -> list[Issue]:
        location = entity.pop("@location", None) if isinstance(entity, dict) else None
        issues = self.walk(
            entity, (PathSegment(type=root_type, index=index),), data_format,
        )
        if not issues:
            return []

        source = entity.get("@source") if isinstance(entity, dict) else None
        if not source and data_format == "jsonld":
            source = json.dumps(entity, ensure_ascii=False, separators=(",", ":"))
        return [
            issue.with_context(
                root_type=root_type,
                data_format=data_format,
                location=location,
                source=source,
            )
            for issue in issues
        ]

    def _extraction_errors(self, errors: Any) -> list[Issue]:
        """Surface upstream extraction errors for supported formats."""
        out: list[Issue] = []
        for error in errors or []:
            if not isinstance(error, Mapping):
                logger.debug("Ignoring malformed extraction error %r", error)
                continue
            data_format = error.get("format")
            if data_format not in self.data_formats:
                continue
            location = None
            position = error.get("sourceCodeLocation")
            if isinstance(position, Mapping):
                start, end = position.get("startOffset"), position.get("endOffset")
                if start is not None and end is not None:
                    location = f"{start},{end}"
            out.append(Issue(
                issue_message=str(error.get("message", "")),
                severity=ERROR,
                root_type=data_format,
                data_format=data_format,
                location=location,
                source=error.get("source") or None,
            ))
        return out

    # ── Tree walk ────────────────────────────────────────────────

    def walk(self, node: Any, path: Path, data_format: str) -> list[Issue]:
        """Validate *node* and everything typed beneath it."""
        if isinstance(node, list):
            return self._walk_array(node, path, data_format)
        if isinstance(node, dict):
            return self._walk_entity(node, path, data_format)
        return []

    def _walk_array(self, items: list[Any], path: Path, data_format: str) -> list[Issue]:
        issues: list[Issue] = []
        last = path[-1] if path else PathSegment()
        for index, item in enumerate(items):
            segment = last.with_(index=index, length=len(items))
            if isinstance(item, dict) and _declares_type(item):
                segment = segment.with_(type=item["@type"])
            issues.extend(self.walk(item, (*path[:-1], segment), data_format))
        return issues

    def _walk_entity(self, entity: dict[str, Any], path: Path, data_format: str) -> list[Issue]:
        if not _declares_type(entity):
            logger.debug("Skipping entity without @type at depth %d", len(path))
            return []

        issues: list[Issue] = []
        for type_name in _types_of(entity):
            issues.extend(self._run_rule_sets(entity, type_name, path, data_format))

        for prop, value in entity.items():
            if prop.startswith("@") or not _is_nested_entity(value):
                continue
            first = value[0] if isinstance(value, list) else value
            segment = PathSegment(property=prop, type=first.get("@type") or None)
            issues.extend(self.walk(value, (*path, segment), data_format))
        return issues

    def _run_rule_sets(
        self, entity: dict[str, Any], type_name: str, path: Path, data_format: str,
    ) -> list[Issue]:
        factories = self._resolver.resolve(type_name)
        if not factories:
            logger.debug("No handlers registered for type %s", type_name)
        factories = [*factories, *self.global_handlers]

        context = RuleSetContext(
            data_format=data_format,
            path=path,
            type=type_name,
            vocabulary=self.vocabulary,
        )
        issues: list[Issue] = []
        for factory in factories:
            issues.extend(factory(context).validate(entity))
        return issues


def validate_structured_data(
    document: Mapping[str, Any],
    vocabulary: VocabularyGraph | Mapping[str, Any] | None = None,
) -> list[Issue]:
    """Validate *document* with the default rule-sets."""
    return Validator(vocabulary).validate(document)
