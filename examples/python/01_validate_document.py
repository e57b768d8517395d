"""
Example 01: Validating an Extracted Page
=========================================

Demonstrates validating the structured data extracted from one web page:
JSON-LD, microdata and RDFa entities plus upstream parse errors, all in
a single call.

Use case: Checking a product page before it is published.
"""

import json
from structured_data_validator import validate_structured_data

# ── 1. An extracted document ─────────────────────────────────────

print("=== 1. Extracted Document ===\n")

document = {
    "jsonld": {
        "Product": [
            {
                "@type": "Product",
                "@location": "120,980",
                "name": "Super Widget",
                "image": ["https://shop.example.com/widget.jpg"],
                "offers": {
                    "@type": "Offer",
                    "price": "29.99",
                    "availability": "https://schema.org/InStock",
                },
            }
        ],
        "BreadcrumbList": [
            {
                "@type": "BreadcrumbList",
                "itemListElement": [
                    {"@type": "ListItem", "position": 1, "name": "Shop", "item": "https://shop.example.com/"},
                    {"@type": "ListItem", "position": 2, "name": "Widgets"},
                    {"@type": "ListItem", "position": 3, "name": "Super Widget"},
                ],
            }
        ],
    },
    "microdata": {
        "Rating": [
            {"@type": "Rating", "ratingValue": 7, "bestRating": 5, "worstRating": 1},
        ],
    },
    "errors": [
        {
            "format": "jsonld",
            "message": "Unexpected end of JSON input",
            "sourceCodeLocation": {"startOffset": 2048, "endOffset": 2101},
        },
    ],
}

print(f"Formats: {[f for f in ('jsonld', 'microdata', 'rdfa') if f in document]}")

# ── 2. Validate ──────────────────────────────────────────────────

print("\n=== 2. Issues ===\n")

issues = validate_structured_data(document)
for issue in issues:
    where = "/".join(
        str(seg.property or seg.type) + (f"[{seg.index}]" if seg.index is not None else "")
        for seg in issue.path
    )
    print(f"  [{issue.severity:7}] {issue.data_format:9} {where or '-'}: {issue.issue_message}")

# ── 3. Wire form ─────────────────────────────────────────────────

print("\n=== 3. Wire Form ===\n")

errors = [i for i in issues if i.is_error]
print(f"{len(errors)} errors, {len(issues) - len(errors)} warnings")
print(json.dumps(errors[0].to_dict(), indent=2))
