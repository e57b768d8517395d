"""Issue and path value types produced by validation."""

from __future__ import annotations
from dataclasses import dataclass, field, fields, replace
from typing import Any, Optional, Sequence, Union


ERROR = "ERROR"
WARNING = "WARNING"
SEVERITIES = (ERROR, WARNING)

TypeName = Union[str, tuple[str, ...]]


def _type_name(value: Any) -> Optional[TypeName]:
    """Normalise an ``@type`` value to a hashable form."""
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return value


@dataclass(frozen=True)
class PathSegment:
    """One step from the document root towards an entity.

    ``type``, ``index`` and ``length`` locate an array element among its
    siblings; ``property`` names the attribute that led into a nested
    entity.
    """
    type: Optional[TypeName] = None
    index: Optional[int] = None
    length: Optional[int] = None
    property: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", _type_name(self.type))

    def with_(self, **changes: Any) -> PathSegment:
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            out[f.name] = list(value) if isinstance(value, tuple) else value
        return out


Path = tuple[PathSegment, ...]


def make_path(*segments: PathSegment | dict[str, Any]) -> Path:
    """Build a path from segments or plain ``{type, index, ...}`` dicts."""
    return tuple(
        s if isinstance(s, PathSegment) else PathSegment(**s) for s in segments
    )


def path_to_list(path: Sequence[PathSegment]) -> list[dict[str, Any]]:
    return [s.to_dict() for s in path]


# Wire names, in output order.
_WIRE_KEYS = {
    "root_type": "rootType",
    "data_format": "dataFormat",
    "location": "location",
    "source": "source",
    "issue_message": "issueMessage",
    "severity": "severity",
    "path": "path",
    "field_names": "fieldNames",
    "field_name": "fieldName",
    "error_type": "errorType",
}


@dataclass
class Issue:
    """A single graded finding.

    ``field_names`` is always a list; a bare string is wrapped.  The
    ``root_type``/``data_format``/``location``/``source`` fields are left
    unset by rule-sets and filled in by the validator.
    """
    issue_message: str
    severity: str
    path: Path = ()
    field_names: list[str] = field(default_factory=list)
    field_name: Optional[str] = None
    error_type: Optional[str] = None
    root_type: Optional[str] = None
    data_format: Optional[str] = None
    location: Optional[str] = None
    source: Optional[str] = None

    def __post_init__(self) -> None:
        if self.severity not in SEVERITIES:
            raise ValueError(
                f"Severity must be one of {SEVERITIES}, got: {self.severity!r}"
            )
        if isinstance(self.field_names, str):
            self.field_names = [self.field_names]
        else:
            self.field_names = list(self.field_names)
        self.path = make_path(*self.path)

    @property
    def is_error(self) -> bool:
        return self.severity == ERROR

    def with_context(
        self,
        *,
        root_type: Optional[str] = None,
        data_format: Optional[str] = None,
        location: Optional[str] = None,
        source: Optional[str] = None,
    ) -> Issue:
        """Return a copy tagged with document-level context."""
        return replace(
            self,
            root_type=root_type,
            data_format=data_format,
            location=location,
            source=source,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the camelCase wire form, omitting unset optionals."""
        out: dict[str, Any] = {}
        for attr, key in _WIRE_KEYS.items():
            value = getattr(self, attr)
            if attr == "path":
                out[key] = path_to_list(value)
            elif attr == "field_names":
                out[key] = list(value)
            elif value is not None:
                out[key] = value
        return out
