"""Lookup service facade used by editor integrations."""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from lexdb.services.tokenizer import Tokenizer
from lexdb.services.wordnet.base import Definition, Lemma, RelatedSense, RelationKind, Sense
from lexdb.services.wordnet.errors import CorruptIndexError, CorruptSynsetError
from lexdb.services.wordnet.lemmatizer import Lemmatizer
from lexdb.services.wordnet.relations import ALL, RelationResolver
from lexdb.services.wordnet.store import LexicalStore

if TYPE_CHECKING:
    from lexdb.config import Settings

logger = logging.getLogger(__name__)


class LookupService:
    """
    Facade for hover, goto-definition, completion and code-action queries.

    Every operation is a synchronous function of its input that returns
    structured records; an unknown word yields an empty list. Whether a
    feature is enabled is for the caller to check.
    """

    DEFAULT_COMPLETION_LIMIT = 100

    def __init__(
        self,
        store: LexicalStore,
        completion_limit: int = DEFAULT_COMPLETION_LIMIT,
        definition_depth: int = 1,
        tokenizer: Tokenizer | None = None,
    ) -> None:
        self.store = store
        self.completion_limit = completion_limit
        self.definition_depth = definition_depth
        self.resolver = RelationResolver(store)
        self.lemmatizer = Lemmatizer.for_store(store)
        self.tokenizer = tokenizer or Tokenizer()

    @classmethod
    def from_settings(cls, settings: "Settings | None" = None) -> "LookupService":
        if settings is None:
            from lexdb.config import settings as default_settings

            settings = default_settings
        return cls(
            LexicalStore.from_settings(settings),
            completion_limit=settings.completion_limit,
            definition_depth=settings.definition_depth,
        )

    def lemmas_for(self, word: str) -> list[Lemma]:
        """Return the indexed lemmas a surface form may stand for."""
        return [
            Lemma(text, pos)
            for pos, forms in self.lemmatizer.lemmatize(word).items()
            for text in forms
        ]

    def hover(self, word: str) -> list[Sense]:
        """
        Return every sense of word, noun senses first.

        Inflected forms resolve through their base forms ("dogs" finds "dog")
        in parts of speech where the exact form is not indexed.
        A lemma whose index line or synsets are corrupt is logged and left
        out; the remaining senses are still returned.
        """
        senses = []
        for lemma in self.lemmas_for(word):
            try:
                senses.extend(self.store.senses_for(lemma))
            except (CorruptIndexError, CorruptSynsetError) as e:
                logger.error(f"Skipping {lemma.pos.label} '{lemma.text}': {e}")
        return senses

    def definition(self, word: str, depth: int | None = None) -> list[Definition]:
        """Return every sense of word with its relations grouped by kind."""
        depth = self.definition_depth if depth is None else depth
        definitions = []
        for sense in self.hover(word):
            expansion = self.resolver.expand_with_report(sense, ALL, depth)
            grouped: dict[RelationKind, list[RelatedSense]] = {}
            for related in expansion.senses:
                grouped.setdefault(related.relation, []).append(related)
            definitions.append(Definition(sense=sense, relations=grouped))
        return definitions

    def related(self, word: str, kind: RelationKind | str, depth: int = 1) -> list[RelatedSense]:
        """Expand one relation from every sense of word, without repeats."""
        seen = set()
        result = []
        for sense in self.hover(word):
            for related in self.resolver.expand(sense, kind, depth):
                if related.key not in seen:
                    seen.add(related.key)
                    result.append(related)
        return result

    def complete(self, prefix: str) -> list[Lemma]:
        """Return lemmas starting with prefix, capped at the completion limit."""
        return self.store.completions_with_prefix(prefix, self.completion_limit)

    def code_actions(self, words: Iterable[str]) -> list[Lemma]:
        """Return the candidate words that can be defined, in input order."""
        actions: dict[str, Lemma] = {}
        for word in words:
            lemma = self.store.find_lemma(word)
            if lemma is not None:
                actions.setdefault(lemma.text, lemma)
        return list(actions.values())

    def candidates_at(self, text: str, line: int, character: int) -> list[str]:
        return self.tokenizer.words_at(text, line, character)

    def hover_at(self, text: str, line: int, character: int) -> list[Sense]:
        """Hover for the shortest cursor candidate that resolves to a lemma."""
        for candidate in self.candidates_at(text, line, character):
            if self.lemmas_for(candidate):
                return self.hover(candidate)
        return []
