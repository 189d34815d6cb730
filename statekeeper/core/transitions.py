# statekeeper/core/transitions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Dict, Iterator, Tuple

from statekeeper.core.types import StateId

logger = logging.getLogger(__name__)


class TransitionTable:
    """
    Records which target states are directly reachable from each source state.
    Used by the state machine to validate a requested transition before any
    callback runs.

    Targets are kept in insertion order and never duplicated. The table is
    append-only: there is no way to remove a transition once added.
    """

    def __init__(self) -> None:
        # dict keys double as an insertion-ordered set
        self._transitions: Dict[StateId, Dict[StateId, None]] = {}

    def add(self, source: StateId, target: StateId) -> None:
        """
        Allow moving from ``source`` to ``target``. Adding the same pair twice
        has no further effect. ``source`` may equal ``target``.

        :param source: The state the transition starts from.
        :param target: The state the transition leads to.
        """
        targets = self._transitions.setdefault(source, {})
        if target in targets:
            return
        targets[target] = None
        logger.debug("Added transition %r -> %r", source, target)

    def has_source(self, source: StateId) -> bool:
        """
        Return True if at least one transition leaves ``source``.
        """
        return source in self._transitions

    def targets(self, source: StateId) -> Tuple[StateId, ...]:
        """
        Return the targets reachable from ``source`` in the order they were added.
        An unknown source yields an empty tuple.
        """
        return tuple(self._transitions.get(source, ()))

    def allows(self, source: StateId, target: StateId) -> bool:
        """
        Return True if ``target`` is registered as reachable from ``source``.
        """
        return target in self._transitions.get(source, ())

    def __contains__(self, pair: Tuple[StateId, StateId]) -> bool:
        source, target = pair
        return self.allows(source, target)

    def __iter__(self) -> Iterator[Tuple[StateId, StateId]]:
        for source, targets in self._transitions.items():
            for target in targets:
                yield source, target

    def __len__(self) -> int:
        return sum(len(targets) for targets in self._transitions.values())
