"""Error taxonomy for the lexical database.

A word that is not in the dictionary is never an error: lookups return an
empty sequence. Dangling pointers are reported as records by the relation
resolver rather than raised.
"""

from pathlib import Path

from lexdb.services.wordnet.base import PartOfSpeech


class LexiconError(Exception):
    """Base class for lexical database errors."""


class MissingFileError(LexiconError):
    """A required dictionary file is absent or unreadable."""

    def __init__(self, path: Path, reason: str = "not found") -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Dictionary file {path} is {reason}")


class CorruptIndexError(LexiconError):
    """An index line does not follow the index grammar."""

    def __init__(self, pos: PartOfSpeech, lemma: str, reason: str) -> None:
        self.pos = pos
        self.lemma = lemma
        self.reason = reason
        super().__init__(f"Corrupt index.{pos.suffix} entry for {lemma!r}: {reason}")


class CorruptSynsetError(LexiconError):
    """A data line fails to parse or does not start at the requested offset."""

    def __init__(self, pos: PartOfSpeech, offset: int, reason: str) -> None:
        self.pos = pos
        self.offset = offset
        self.reason = reason
        super().__init__(f"Corrupt data.{pos.suffix} synset at {offset}: {reason}")
