"""Slot discovery and override-to-slot matching.

A template marks the positions its composite may fill with slot nodes
(``NodeKind.SLOT``). Only the *direct* children of the template root are
considered; a slot nested inside a child group is never found.

Overrides are matched to slots in one of two modes, chosen by the first
override:

- explicit: every override names the id of the slot it fills
  (``slot_target``), in any order
- positional: no override names a slot, and the i-th override fills the
  i-th slot

Mixing the two is an error, as is supplying more overrides than slots.
Slots left without an override are removed from the template.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from ..core.node import SceneNode
from ..errors import ConsistencyError, OverCommitError, UnresolvedIdError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Override:
    """A node taken from a composite, with the slot id it asked for."""

    node: SceneNode
    target: int | None = None

    @property
    def is_explicit(self) -> bool:
        return self.target is not None


@dataclass
class SlotMatch:
    """Result of matching overrides to slots.

    Attributes:
        pairs: (slot, override) in the order the overrides were supplied
        leftovers: Slots that no override claimed, in template order
    """

    pairs: list[tuple[SceneNode, Override]] = field(default_factory=list)
    leftovers: list[SceneNode] = field(default_factory=list)


def collect_slots(root: SceneNode) -> list[SceneNode]:
    """Return the direct children of ``root`` that are slot markers, in order."""
    return [child for child in root.children if child.is_slot]


def extract_overrides(composite: SceneNode) -> list[Override]:
    """Detach all children of ``composite`` and wrap them as overrides.

    The composite is left with no children.
    """
    return [
        Override(node=child, target=child.slot_target)
        for child in composite.remove_all_children()
    ]


def match_slots(overrides: Sequence[Override], slots: Sequence[SceneNode]) -> SlotMatch:
    """Pair each override with the slot it replaces.

    Args:
        overrides: Overrides in the order they were declared
        slots: Slot markers in template order

    Returns:
        The matched pairs and the unclaimed slots

    Raises:
        OverCommitError: More overrides than slots
        ConsistencyError: Explicit and positional overrides are mixed
        UnresolvedIdError: An explicit target id has no available slot
    """
    if len(overrides) > len(slots):
        raise OverCommitError(len(overrides), len(slots))

    if not overrides:
        return SlotMatch(leftovers=list(slots))

    if overrides[0].is_explicit:
        return _match_explicit(overrides, slots)
    return _match_positional(overrides, slots)


def _match_explicit(overrides: Sequence[Override], slots: Sequence[SceneNode]) -> SlotMatch:
    logger.debug("Matching %d override(s) to slots by id", len(overrides))
    pool = list(slots)
    result = SlotMatch()

    for override in overrides:
        if not override.is_explicit:
            raise ConsistencyError(
                f"Expected slot_target for '{override.node.name}' "
                "(if one child has a slot_target, they all must)"
            )
        slot = _take_slot(pool, override.target)
        if slot is None:
            raise UnresolvedIdError(override.target, override.node.name)
        result.pairs.append((slot, override))

    result.leftovers = pool
    return result


def _match_positional(overrides: Sequence[Override], slots: Sequence[SceneNode]) -> SlotMatch:
    logger.debug("Matching %d override(s) to slots by position", len(overrides))
    result = SlotMatch()

    for slot, override in zip(slots, overrides):
        if override.is_explicit:
            raise ConsistencyError(
                f"Unexpected slot_target {override.target} on '{override.node.name}' "
                "(if one child has a slot_target, they all must)"
            )
        result.pairs.append((slot, override))

    result.leftovers = list(slots[len(overrides):])
    return result


def _take_slot(pool: list[SceneNode], slot_id: int) -> SceneNode | None:
    """Remove and return the first slot in ``pool`` with the given id."""
    for index, slot in enumerate(pool):
        if slot.id == slot_id:
            return pool.pop(index)
    return None


def remove_leftovers(slots: Sequence[SceneNode]) -> None:
    """Remove each unclaimed slot from its parent."""
    for slot in slots:
        logger.debug("Removing unclaimed slot %r", slot)
        slot.detach()
