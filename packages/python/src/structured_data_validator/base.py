"""Condition combinators and the rule-set contract.

A *condition* is a callable taking an entity and returning ``None`` on
success, or an :class:`Issue` (or a list of them) on failure.  A
*rule-set* bundles the conditions for one semantic type; each rule-set is
built per node from a :class:`RuleSetContext` and discarded afterwards.

Concrete rule-sets subclass :class:`BaseRuleSet` and override
:meth:`BaseRuleSet.get_conditions`, composing conditions from
:meth:`~BaseRuleSet.required`, :meth:`~BaseRuleSet.recommended` and
:meth:`~BaseRuleSet.or_`, or writing methods that return issues directly.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Optional, Sequence, Union

from structured_data_validator.checks import check_type
from structured_data_validator.issues import ERROR, WARNING, Issue, Path

if TYPE_CHECKING:
    from structured_data_validator.vocabulary import VocabularyGraph


ConditionResult = Union[Issue, list[Issue], None]
Condition = Callable[..., ConditionResult]


@dataclass(frozen=True)
class RuleSetContext:
    """Everything a rule-set knows about the node it validates."""
    data_format: str
    path: Path
    type: str
    vocabulary: Optional[VocabularyGraph] = None


RuleSetFactory = Callable[[RuleSetContext], "BaseRuleSet"]


def value_by_path(entity: Any, dotted: str) -> Any:
    """Resolve a dotted field path such as ``"offers.price"``.

    Each segment indexes into the current mapping (or list, for numeric
    segments).  Any missing or scalar intermediate yields ``None``.
    """
    value = entity
    for part in dotted.split("."):
        if isinstance(value, dict):
            value = value.get(part)
        elif isinstance(value, (list, tuple)) and part.isdigit():
            i = int(part)
            value = value[i] if i < len(value) else None
        else:
            return None
    return value


def is_missing(value: Any) -> bool:
    return value is None or value == ""


class BaseRuleSet:
    """Base class for per-type rule-sets."""

    def __init__(self, context: RuleSetContext):
        self.context = context

    @property
    def data_format(self) -> str:
        return self.context.data_format

    @property
    def path(self) -> Path:
        return self.context.path

    @property
    def type(self) -> str:
        return self.context.type

    @property
    def vocabulary(self) -> Optional[VocabularyGraph]:
        return self.context.vocabulary

    # ── Contract ─────────────────────────────────────────────────

    def get_conditions(self, entity: dict[str, Any]) -> list[Condition]:
        """Conditions to run for *entity*; may depend on its field values."""
        return []

    def validate(self, entity: dict[str, Any]) -> list[Issue]:
        """Run every condition in order, flattening results and dropping passes."""
        issues: list[Issue] = []
        for condition in self.get_conditions(entity):
            result = condition(entity)
            if isinstance(result, list):
                issues.extend(result)
            elif result:
                issues.append(result)
        return issues

    # ── Issue construction ───────────────────────────────────────

    def issue(
        self,
        message: str,
        severity: str,
        field_names: Sequence[str] | str,
        *,
        path: Optional[Path] = None,
        field_name: Optional[str] = None,
        error_type: Optional[str] = None,
    ) -> Issue:
        return Issue(
            issue_message=message,
            severity=severity,
            path=self.path if path is None else path,
            field_names=field_names if isinstance(field_names, str) else list(field_names),
            field_name=field_name,
            error_type=error_type,
        )

    # ── Combinators ──────────────────────────────────────────────

    def required(self, field_path: str, kind: Optional[str] = None, *args: Any) -> Condition:
        """ERROR when *field_path* is missing or fails the *kind* check."""
        return self._presence(
            field_path, kind, args, ERROR,
            f'Required attribute "{field_path}" is missing',
        )

    def recommended(self, field_path: str, kind: Optional[str] = None, *args: Any) -> Condition:
        """WARNING when *field_path* is missing or fails the *kind* check."""
        return self._presence(
            field_path, kind, args, WARNING,
            f'Missing field "{field_path}" (optional)',
        )

    def _presence(
        self,
        field_path: str,
        kind: Optional[str],
        args: tuple[Any, ...],
        severity: str,
        missing_message: str,
    ) -> Condition:
        def condition(entity: Any, index: Optional[int] = None, root: Any = None) -> Optional[Issue]:
            value = value_by_path(entity, field_path)
            if is_missing(value):
                return self.issue(missing_message, severity, [field_path])
            if kind and not check_type(value, kind, *args):
                return self.issue(
                    f'Invalid type for attribute "{field_path}"', severity, [field_path],
                )
            return None

        return condition

    def or_(self, *conditions: Condition) -> Condition:
        """Pass when at least one of *conditions* passes.

        On failure the combined issue is an ERROR if any branch reported an
        ERROR, otherwise a WARNING.  Field names and messages are collected
        in argument order.  Every branch is called with the same
        ``(entity, index, root)`` arguments.
        """
        def condition(entity: Any, index: Optional[int] = None, root: Any = None) -> Optional[Issue]:
            results = [c(entity, index, root) for c in conditions]
            if any(r is None or r == [] for r in results):
                return None

            flat: list[Issue] = []
            for r in results:
                if isinstance(r, list):
                    flat.extend(i for i in r if isinstance(i, Issue))
                elif isinstance(r, Issue):
                    flat.append(r)

            severity = ERROR if any(i.severity == ERROR for i in flat) else WARNING
            field_names = [name for i in flat for name in i.field_names]
            message = " or ".join(i.issue_message for i in flat)
            return self.issue(
                f"One of the following conditions needs to be met: {message}",
                severity,
                field_names,
            )

        return condition

    # ── Path introspection ───────────────────────────────────────

    def in_type(self, name: str) -> bool:
        """True if the parent entity (second-to-last path segment) has type *name*."""
        return len(self.path) > 1 and self.path[-2].type == name

    def in_property(self, name: str) -> bool:
        """True if the current entity was reached via property *name*."""
        return len(self.path) > 1 and self.path[-1].property == name

    check_type = staticmethod(check_type)
