"""Tests for issue and path value types."""

import pytest
from structured_data_validator.issues import ERROR, WARNING, Issue, PathSegment, make_path


class TestPathSegment:
    def test_to_dict_omits_unset(self):
        assert PathSegment(type="Product", index=0).to_dict() == {"type": "Product", "index": 0}

    def test_with_returns_copy(self):
        seg = PathSegment(property="offers")
        other = seg.with_(index=1, length=2)
        assert seg.index is None
        assert other.to_dict() == {"property": "offers", "index": 1, "length": 2}

    def test_multi_type_is_hashable(self):
        seg = PathSegment(type=["Product", "Car"])
        assert seg.type == ("Product", "Car")
        assert seg.to_dict() == {"type": ["Product", "Car"]}
        hash(seg)


class TestIssue:
    def test_field_names_string_wrapped(self):
        issue = Issue("m", WARNING, field_names="name")
        assert issue.field_names == ["name"]

    def test_invalid_severity(self):
        with pytest.raises(ValueError, match="Severity"):
            Issue("m", "INFO")

    def test_path_dicts_converted(self):
        issue = Issue("m", ERROR, path=[{"type": "Product", "index": 0}])
        assert issue.path == make_path(PathSegment(type="Product", index=0))

    def test_to_dict(self):
        issue = Issue(
            "Type \"X\" is not a valid schema.org type", ERROR,
            path=make_path({"type": "X", "index": 0}),
            field_names=["@type"], field_name="@type", error_type="schemaOrg",
        ).with_context(root_type="X", data_format="jsonld", location="1,2")
        assert issue.to_dict() == {
            "rootType": "X",
            "dataFormat": "jsonld",
            "location": "1,2",
            "issueMessage": "Type \"X\" is not a valid schema.org type",
            "severity": "ERROR",
            "path": [{"type": "X", "index": 0}],
            "fieldNames": ["@type"],
            "fieldName": "@type",
            "errorType": "schemaOrg",
        }

    def test_with_context_is_a_copy(self):
        issue = Issue("m", ERROR)
        tagged = issue.with_context(root_type="Product", data_format="rdfa")
        assert issue.root_type is None
        assert tagged.root_type == "Product"
        assert tagged.is_error
