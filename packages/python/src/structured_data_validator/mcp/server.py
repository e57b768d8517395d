"""
structured-data-validator MCP Server — Model Context Protocol integration.

Exposes the validator as read-only MCP tools for LLM agents:

  - ``validate_structured_data``: validate an extracted document
  - ``check_value_type``: run a single type-checker primitive

Usage::

    python -m structured_data_validator.mcp          # stdio transport (default)
    python -m structured_data_validator.mcp --http   # streamable HTTP

Requires: pip install structured-data-validator[mcp]
"""

from __future__ import annotations

import json
from typing import Any, Optional

from mcp.server.fastmcp import FastMCP

from structured_data_validator.checks import TYPE_CHECKS, check_type
from structured_data_validator.validator import Validator
from structured_data_validator.vocabulary import VocabularyGraph


mcp = FastMCP(
    "structured-data-validator",
    instructions=(
        "Validates structured data (JSON-LD, microdata, RDFa) extracted "
        "from web pages against per-type rules and, optionally, the "
        "schema.org vocabulary. All tools are read-only and stateless."
    ),
)


# ── Helpers ────────────────────────────────────────────────────────

def _load_object(text: str, label: str) -> dict[str, Any]:
    """Decode a tool argument that must hold a JSON object."""
    try:
        value = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {label}: {exc}") from exc
    if not isinstance(value, dict):
        raise ValueError(f"{label} must be a JSON object, got: {type(value).__name__}")
    return value


# ═══════════════════════════════════════════════════════════════════
# Tools
# ═══════════════════════════════════════════════════════════════════


@mcp.tool()
def validate_structured_data(
    document_json: str,
    vocabulary_json: Optional[str] = None,
) -> list[dict]:
    """Validate extracted structured data and list the issues found.

    The document has the shape produced by a structured-data extractor:
    ``{"jsonld": {"Product": [...]}, "microdata": {...}, "rdfa": {...},
    "errors": [...]}``. Each issue carries issueMessage, severity
    (ERROR or WARNING), path, fieldNames, rootType and dataFormat.

    Args:
        document_json: JSON string of the extracted document.
        vocabulary_json: Optional JSON string of the schema.org JSON-LD
            vocabulary. When given, unknown types and properties are
            reported and subtypes inherit their ancestors' rules.

    Returns:
        List of issue dicts, in document order.
    """
    document = _load_object(document_json, "document_json")
    vocabulary = None
    if vocabulary_json is not None:
        vocabulary = VocabularyGraph.from_jsonld(
            _load_object(vocabulary_json, "vocabulary_json")
        )
    issues = Validator(vocabulary).validate(document)
    return [issue.to_dict() for issue in issues]


@mcp.tool()
def check_value_type(value: Any, kind: str, args: Optional[list[Any]] = None) -> bool:
    """Check a single value against a named structured-data type.

    Args:
        value: The value to check (string, number, list, object).
        kind: One of string, object, array, arrayOrObject, number, date,
            url, currency, enum, regex, duration.
        args: Extra arguments: allowed values for ``enum``, the pattern
            for ``regex``.

    Returns:
        True if the value passes the check.
    """
    if kind not in TYPE_CHECKS:
        raise ValueError(
            f"Unknown kind {kind!r}. Valid: {', '.join(sorted(TYPE_CHECKS))}"
        )
    return check_type(value, kind, *(args or []))
