"""Suffix-stripping lemmatizer in the style of WordNet's morphy."""

import logging
from pathlib import Path

from lexdb.services.wordnet.base import PartOfSpeech, normalize
from lexdb.services.wordnet.store import LexicalStore

logger = logging.getLogger(__name__)

# (inflected suffix, base ending) pairs tried in order
DETACHMENT_RULES: dict[PartOfSpeech, tuple[tuple[str, str], ...]] = {
    PartOfSpeech.NOUN: (
        ("s", ""),
        ("ses", "s"),
        ("xes", "x"),
        ("zes", "z"),
        ("ches", "ch"),
        ("shes", "sh"),
        ("men", "man"),
        ("ies", "y"),
    ),
    PartOfSpeech.VERB: (
        ("s", ""),
        ("ies", "y"),
        ("es", "e"),
        ("es", ""),
        ("ed", "e"),
        ("ed", ""),
        ("ing", "e"),
        ("ing", ""),
    ),
    PartOfSpeech.ADJECTIVE: (
        ("er", ""),
        ("est", ""),
        ("er", "e"),
        ("est", "e"),
    ),
    PartOfSpeech.ADVERB: (),
}


def load_exceptions(path: Path) -> dict[str, tuple[str, ...]]:
    """Read a morphological exception file ("inflected base [base...]" per line)."""
    exceptions: dict[str, tuple[str, ...]] = {}
    if not path.is_file():
        logger.debug(f"No exception list at {path}")
        return exceptions

    with path.open(encoding="utf-8", errors="replace") as f:
        for line in f:
            fields = line.split()
            if len(fields) >= 2:
                exceptions.setdefault(fields[0], tuple(fields[1:]))
    return exceptions


class Lemmatizer:
    """
    Map inflected forms to the base forms present in the index.

    Irregular forms come from the optional noun.exc, verb.exc, adj.exc and
    adv.exc files; regular forms from the detachment rules.
    """

    def __init__(
        self,
        store: LexicalStore,
        exceptions: dict[PartOfSpeech, dict[str, tuple[str, ...]]] | None = None,
    ) -> None:
        self.store = store
        self.exceptions = exceptions if exceptions is not None else {}

    @classmethod
    def for_store(cls, store: LexicalStore) -> "Lemmatizer":
        """Build a lemmatizer using the exception files beside the store's data."""
        exceptions = {
            pos: load_exceptions(store.directory / f"{pos.suffix}.exc") for pos in PartOfSpeech
        }
        return cls(store, exceptions)

    def base_forms(self, word: str, pos: PartOfSpeech) -> list[str]:
        """Return base forms of word found in pos's index, excluding word itself."""
        word = normalize(word)
        candidates = list(self.exceptions.get(pos, {}).get(word, ()))
        for suffix, ending in DETACHMENT_RULES[pos]:
            if word.endswith(suffix):
                candidates.append(word[: -len(suffix)] + ending)

        forms: list[str] = []
        for candidate in candidates:
            if not candidate or candidate == word or candidate in forms:
                continue
            if self.store.contains(candidate, pos):
                forms.append(candidate)
        return forms

    def lemmatize(self, word: str) -> dict[PartOfSpeech, list[str]]:
        """
        Return the lemmas word may stand for, per part of speech.

        A word indexed in a part of speech stands only for itself there
        ("glasses" is not reduced to "glass"); otherwise its base forms are
        used. Parts of speech with no lemma are omitted.
        """
        word = normalize(word)
        result = {}
        for pos in PartOfSpeech:
            if self.store.contains(word, pos):
                forms = [word]
            else:
                forms = self.base_forms(word, pos)
            if forms:
                result[pos] = forms
        return result
