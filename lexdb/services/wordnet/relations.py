"""Relation resolver: breadth-first traversal of the pointer graph."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Literal

from lexdb.services.wordnet.base import (
    Lemma,
    Pointer,
    RelatedSense,
    RelationKind,
    Sense,
    Synset,
    SynsetKey,
)
from lexdb.services.wordnet.errors import CorruptSynsetError
from lexdb.services.wordnet.store import LexicalStore

logger = logging.getLogger(__name__)

ALL: Literal["all"] = "all"


@dataclass(frozen=True)
class DanglingPointer:
    """A pointer whose target could not be resolved."""

    source: SynsetKey
    pointer: Pointer
    reason: str


@dataclass(frozen=True)
class Expansion:
    senses: list[RelatedSense] = field(default_factory=list)
    dangling: list[DanglingPointer] = field(default_factory=list)


def resolve_kind(kind: RelationKind | str) -> RelationKind | None:
    """Return the relation to follow, or None to follow every pointer."""
    if isinstance(kind, RelationKind):
        return kind
    if kind.strip().lower() == ALL:
        return None
    return RelationKind.parse(kind)


class RelationResolver:
    """
    Answers "all hypernyms (hyponyms, ...) of this sense" queries.

    Pointers are (part of speech, offset) pairs resolved through the store,
    so cycles in the graph never become reference cycles in memory. The walk
    tracks visited synsets, starting with the origin, so it terminates on
    cyclic graphs and yields each synset at most once.
    """

    def __init__(self, store: LexicalStore) -> None:
        self.store = store

    def expand(
        self, sense: Sense, kind: RelationKind | str, depth: int = 1
    ) -> list[RelatedSense]:
        """Return the senses reachable through kind within depth hops."""
        return self.expand_with_report(sense, kind, depth).senses

    def expand_with_report(
        self, sense: Sense, kind: RelationKind | str, depth: int = 1
    ) -> Expansion:
        """
        Walk pointers of one kind breadth-first from sense.

        Args:
            sense: The origin, never included in the result
            kind: A RelationKind, a relation name or symbol, or "all"
            depth: Maximum number of hops; 1 returns direct relations only

        Returns:
            Reached senses in breadth-first order, plus the pointers that
            could not be resolved
        """
        if depth < 0:
            raise ValueError(f"depth must be non-negative, got {depth}")
        relation = resolve_kind(kind)

        found: list[RelatedSense] = []
        dangling: list[DanglingPointer] = []
        visited = {sense.key}
        failed: set[SynsetKey] = set()
        frontier = [sense]

        for distance in range(1, depth + 1):
            next_frontier = []
            for current in frontier:
                for pointer in self._outgoing(current, relation):
                    if pointer.target_key in visited or pointer.target_key in failed:
                        continue
                    try:
                        reached = self._follow(pointer)
                    except (CorruptSynsetError, IndexError) as e:
                        logger.warning(
                            f"Skipping dangling {pointer.symbol} pointer from "
                            f"{current.synset.pos.label} {current.synset.offset}: {e}"
                        )
                        failed.add(pointer.target_key)
                        dangling.append(DanglingPointer(current.key, pointer, str(e)))
                        continue
                    visited.add(pointer.target_key)
                    found.append(RelatedSense(reached, pointer.relation, pointer.symbol, distance))
                    next_frontier.append(reached)
            if not next_frontier:
                break
            frontier = next_frontier

        return Expansion(senses=found, dangling=dangling)

    def _outgoing(self, sense: Sense, relation: RelationKind | None) -> Iterator[Pointer]:
        """Pointers of the wanted kind that apply to this sense's word."""
        synset = sense.synset
        pointers = synset.pointers if relation is None else synset.pointers_for(relation)
        for pointer in pointers:
            if pointer.source and not self._is_source(synset, pointer, sense.lemma):
                continue
            yield pointer

    def _is_source(self, synset: Synset, pointer: Pointer, lemma: Lemma) -> bool:
        if pointer.source > len(synset.words):
            return False
        return synset.word(pointer.source).lemma == lemma.text

    def _follow(self, pointer: Pointer) -> Sense:
        target = self.store.synset_at(pointer.target_offset, pointer.target_pos)
        if pointer.target:
            word = target.word(pointer.target)
        elif target.words:
            word = target.words[0]
        else:
            raise IndexError("target synset has no words")
        return Sense(Lemma(word.lemma, target.pos), target)
