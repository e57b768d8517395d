"""Read-only view of the schema.org vocabulary graph.

The vocabulary is normally loaded from the schema.org JSON-LD release
(``schemaorg-current-https.jsonld``).  Loading expands the document with
PyLD so compact IRIs (``schema:Thing``), absolute IRIs and either
schema.org scheme all reduce to the same short names (``Thing``).
"""

from __future__ import annotations
import json
import logging
from collections import deque
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Sequence

from pyld import jsonld

logger = logging.getLogger(__name__)

SCHEMA_PREFIXES = ("https://schema.org/", "http://schema.org/", "schema:")

RDFS = "http://www.w3.org/2000/01/rdf-schema#"
RDF = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
RDFS_CLASS = f"{RDFS}Class"
RDFS_SUBCLASS_OF = f"{RDFS}subClassOf"
RDF_PROPERTY = f"{RDF}Property"
DOMAIN_INCLUDES = tuple(f"{p}domainIncludes" for p in SCHEMA_PREFIXES[:2])

# Every class descends from Thing, so properties declared on it apply everywhere.
ROOT_CLASS = "Thing"


def short_name(iri: str) -> str:
    """Strip a schema.org namespace prefix from *iri*."""
    for prefix in SCHEMA_PREFIXES:
        if iri.startswith(prefix):
            return iri[len(prefix):]
    return iri


def _ids(values: Any) -> list[str]:
    if values is None:
        return []
    if not isinstance(values, list):
        values = [values]
    out = []
    for v in values:
        ref = v.get("@id") if isinstance(v, dict) else v
        if isinstance(ref, str):
            out.append(short_name(ref))
    return out


class VocabularyGraph:
    """Classes with their parent edges, and properties with their domains."""

    def __init__(
        self,
        classes: Mapping[str, Sequence[str]],
        properties: Optional[Mapping[str, Sequence[str]]] = None,
    ):
        self._classes = {name: tuple(parents) for name, parents in classes.items()}
        self._properties = {
            name: frozenset(domains) for name, domains in (properties or {}).items()
        }

    @classmethod
    def from_jsonld(cls, document: Any) -> VocabularyGraph:
        """Build the graph from a schema.org JSON-LD vocabulary document."""
        if not isinstance(document, (dict, list)):
            raise TypeError(
                f"Vocabulary must be a dict or list, got: {type(document).__name__}"
            )
        expanded = jsonld.expand(document)
        nodes = list(_iter_nodes(expanded))
        if not nodes:
            raise ValueError("Vocabulary document contains no graph nodes")

        classes: dict[str, list[str]] = {}
        properties: dict[str, list[str]] = {}
        for node in nodes:
            node_id = node.get("@id")
            if not isinstance(node_id, str):
                continue
            name = short_name(node_id)
            node_types = node.get("@type", [])
            if RDFS_CLASS in node_types:
                classes[name] = _ids(node.get(RDFS_SUBCLASS_OF))
            if RDF_PROPERTY in node_types:
                domains: list[str] = []
                for key in DOMAIN_INCLUDES:
                    domains.extend(_ids(node.get(key)))
                properties[name] = domains

        logger.debug(
            "Loaded vocabulary with %d classes and %d properties",
            len(classes), len(properties),
        )
        return cls(classes, properties)

    @classmethod
    def from_file(cls, path: str | Path) -> VocabularyGraph:
        """Load a JSON-LD vocabulary file from disk."""
        text = Path(path).read_text(encoding="utf-8")
        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Vocabulary file {path} is not valid JSON: {exc}") from exc
        return cls.from_jsonld(document)

    # ── Classes ──────────────────────────────────────────────────

    def has_class(self, name: str) -> bool:
        return short_name(name) in self._classes

    def parents(self, name: str) -> list[str]:
        """Immediate parent classes, in declaration order."""
        return list(self._classes.get(short_name(name), ()))

    def ancestors(self, name: str) -> list[str]:
        """All proper ancestors in breadth-first order, nearest first."""
        start = short_name(name)
        seen = {start}
        order: list[str] = []
        queue = deque(self.parents(start))
        while queue:
            current = queue.popleft()
            if current in seen:
                continue
            seen.add(current)
            order.append(current)
            queue.extend(self.parents(current))
        return order

    @property
    def classes(self) -> list[str]:
        return list(self._classes)

    # ── Properties ───────────────────────────────────────────────

    def has_property(self, name: str) -> bool:
        return short_name(name) in self._properties

    def property_domains(self, name: str) -> frozenset[str]:
        return self._properties.get(short_name(name), frozenset())

    def is_property_of(self, prop: str, type_name: str) -> bool:
        """True if *prop* applies to *type_name* directly or via an ancestor."""
        domains = self.property_domains(prop)
        if not domains:
            return False
        if ROOT_CLASS in domains:
            return True
        candidates = [short_name(type_name), *self.ancestors(type_name)]
        return any(c in domains for c in candidates)


def _iter_nodes(expanded: Iterable[Any]) -> Iterable[dict[str, Any]]:
    for item in expanded:
        if not isinstance(item, dict):
            continue
        if "@graph" in item:
            yield from _iter_nodes(item["@graph"])
        else:
            yield item
