"""Lexical store: the single read path over the index and data files."""

import logging
from pathlib import Path
from types import TracebackType
from typing import TYPE_CHECKING, NamedTuple

from lexdb.services.wordnet.base import (
    Lemma,
    PartOfSpeech,
    Sense,
    Synset,
    SynsetKey,
    normalize,
)
from lexdb.services.wordnet.data import SynsetReader
from lexdb.services.wordnet.errors import LexiconError, MissingFileError
from lexdb.services.wordnet.index import IndexReader

if TYPE_CHECKING:
    from lexdb.config import Settings

logger = logging.getLogger(__name__)


class CacheInfo(NamedTuple):
    hits: int
    misses: int
    size: int


class LexicalStore:
    """
    Owns the index and synset readers for one WordNet directory.

    Decoded synsets are memoized for the lifetime of the store; the corpus
    is static, so nothing is evicted. The cache is the only mutable state.
    Two threads decoding the same offset for the first time both parse it
    and the first stored result is kept.
    """

    def __init__(self, directory: Path, preload: bool = False) -> None:
        """
        Open a WordNet database directory.

        Args:
            directory: Directory holding index.* and data.* files
            preload: Read data files fully into memory instead of mapping them

        Raises:
            MissingFileError: If the directory or any required file is missing
        """
        self.directory = Path(directory)
        if not self.directory.is_dir():
            raise MissingFileError(self.directory, "not a directory")

        for pos in PartOfSpeech:
            for path in (self.index_path(pos), self.data_path(pos)):
                if not path.is_file():
                    raise MissingFileError(path)

        self._indexes = {pos: IndexReader(self.index_path(pos), pos) for pos in PartOfSpeech}
        self._data = {
            pos: SynsetReader(self.data_path(pos), pos, preload=preload) for pos in PartOfSpeech
        }
        self._cache: dict[SynsetKey, Synset] = {}
        self._hits = 0
        self._misses = 0

        mode = "preloaded" if preload else "memory-mapped"
        logger.info(f"Loaded WordNet from {self.directory} ({self.lemma_count()} lemmas, {mode})")

    @classmethod
    def from_settings(cls, settings: "Settings | None" = None) -> "LexicalStore":
        """Open the directory named by configuration."""
        if settings is None:
            from lexdb.config import settings as default_settings

            settings = default_settings
        if settings.wordnet_dir is None:
            raise LexiconError("No WordNet directory configured; set WNSEARCHDIR")
        return cls(settings.wordnet_dir, preload=settings.preload_data)

    def index_path(self, pos: PartOfSpeech) -> Path:
        return self.directory / f"index.{pos.suffix}"

    def data_path(self, pos: PartOfSpeech) -> Path:
        return self.directory / f"data.{pos.suffix}"

    def index(self, pos: PartOfSpeech) -> IndexReader:
        return self._indexes[pos]

    def data(self, pos: PartOfSpeech) -> SynsetReader:
        return self._data[pos]

    def senses_for(self, lemma: str | Lemma, pos: PartOfSpeech | None = None) -> list[Sense]:
        """
        Resolve a lemma to its senses.

        Args:
            lemma: A word (normalized here) or a Lemma, whose part of speech
                is used when pos is omitted
            pos: Restrict to one part of speech; otherwise noun, verb,
                adjective and adverb results are concatenated in that order

        Returns:
            Senses in index order, empty if the lemma is unknown

        Raises:
            CorruptIndexError: If the lemma's index line is malformed
            CorruptSynsetError: If a listed offset does not decode
        """
        if isinstance(lemma, Lemma):
            text = lemma.text
            pos = pos or lemma.pos
        else:
            text = normalize(lemma)

        senses = []
        for part in [pos] if pos else PartOfSpeech:
            entry = self._indexes[part].lookup(text)
            if entry is None:
                continue
            key = Lemma(text, part)
            for number, offset in enumerate(entry.offsets, start=1):
                senses.append(Sense(key, self.synset_at(offset, part), number))
        return senses

    def synset_at(self, offset: int, pos: PartOfSpeech) -> Synset:
        """
        Return the synset at offset in pos's data file, decoding it once.

        Raises:
            CorruptSynsetError: If the offset does not start a valid entry
        """
        key = (pos, offset)
        cached = self._cache.get(key)
        if cached is not None:
            self._hits += 1
            return cached

        self._misses += 1
        synset = self._data[pos].read(offset)
        return self._cache.setdefault(key, synset)

    def completions_with_prefix(self, prefix: str, limit: int) -> list[Lemma]:
        """
        Return up to limit lemmas starting with prefix, in lexicographic order.

        Matching is on the normalized form. A lemma present in several parts
        of speech appears once, tagged with the first of them.
        """
        if limit <= 0:
            return []

        key = normalize(prefix)
        first_pos: dict[str, PartOfSpeech] = {}
        for pos in PartOfSpeech:
            for text in self._indexes[pos].lemmas_with_prefix(key, limit):
                first_pos.setdefault(text, pos)

        return [Lemma(text, first_pos[text]) for text in sorted(first_pos)[:limit]]

    def contains(self, word: str, pos: PartOfSpeech | None = None) -> bool:
        text = normalize(word)
        return any(text in self._indexes[part] for part in ([pos] if pos else PartOfSpeech))

    def find_lemma(self, word: str) -> Lemma | None:
        """Return the word as a Lemma of the first part of speech listing it."""
        text = normalize(word)
        for pos in PartOfSpeech:
            if text in self._indexes[pos]:
                return Lemma(text, pos)
        return None

    def lemma_count(self, pos: PartOfSpeech | None = None) -> int:
        return sum(len(self._indexes[part]) for part in ([pos] if pos else PartOfSpeech))

    def cache_info(self) -> CacheInfo:
        return CacheInfo(hits=self._hits, misses=self._misses, size=len(self._cache))

    def close(self) -> None:
        """Release the mapped data files."""
        for reader in self._data.values():
            reader.close()
        self._cache.clear()

    def __enter__(self) -> "LexicalStore":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
