"""Resolution of rule-set factories for a type name."""

from __future__ import annotations
import logging
from collections import deque
from typing import Mapping, Optional, Sequence

from structured_data_validator.base import RuleSetFactory
from structured_data_validator.vocabulary import VocabularyGraph

logger = logging.getLogger(__name__)


class HandlerResolver:
    """Map a type name to its rule-set factories.

    A direct registration always wins.  Otherwise, when a vocabulary is
    available, parent types are searched breadth-first and the nearest
    registered ancestor's factories are used.
    """

    def __init__(
        self,
        handlers: Mapping[str, Sequence[RuleSetFactory]],
        vocabulary: Optional[VocabularyGraph] = None,
    ):
        self._handlers = handlers
        self._vocabulary = vocabulary

    def resolve(self, type_name: str) -> list[RuleSetFactory]:
        direct = self._handlers.get(type_name)
        if direct is not None:
            return list(direct)

        if self._vocabulary is None:
            return []

        visited = {type_name}
        queue = deque(self._vocabulary.parents(type_name))
        while queue:
            current = queue.popleft()
            if current in visited:
                continue
            visited.add(current)
            inherited = self._handlers.get(current)
            if inherited is not None:
                logger.debug("Using %s handlers for subtype %s", current, type_name)
                return list(inherited)
            queue.extend(self._vocabulary.parents(current))

        return []
