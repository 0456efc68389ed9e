"""Reader for the per-part-of-speech index files (index.noun, index.verb, ...)."""

import logging
from bisect import bisect_left
from dataclasses import dataclass
from pathlib import Path

from lexdb.services.wordnet.base import PartOfSpeech
from lexdb.services.wordnet.errors import CorruptIndexError, MissingFileError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexEntry:
    """One parsed index line."""

    lemma: str
    pos: PartOfSpeech
    synset_count: int
    pointer_symbols: tuple[str, ...]
    sense_count: int
    tagsense_count: int
    offsets: tuple[int, ...]


def parse_index_line(line: str, pos: PartOfSpeech) -> IndexEntry:
    """
    Parse an index line.

    Layout: lemma pos synset_cnt p_cnt [ptr_symbol...] sense_cnt
    tagsense_cnt synset_offset [synset_offset...]

    Raises:
        CorruptIndexError: If the line does not follow the layout
    """
    fields = line.split()
    lemma = fields[0] if fields else ""
    if len(fields) < 6:
        raise CorruptIndexError(pos, lemma, f"expected at least 6 fields, got {len(fields)}")

    if fields[1] != pos.value:
        raise CorruptIndexError(pos, lemma, f"part of speech tag {fields[1]!r}")

    try:
        synset_count = int(fields[2])
        pointer_count = int(fields[3])
        symbols = tuple(fields[4 : 4 + pointer_count])
        sense_count = int(fields[4 + pointer_count])
        tagsense_count = int(fields[5 + pointer_count])
        offsets = tuple(int(field) for field in fields[6 + pointer_count :])
    except (ValueError, IndexError) as e:
        raise CorruptIndexError(pos, lemma, str(e)) from e

    if len(symbols) != pointer_count:
        raise CorruptIndexError(pos, lemma, f"expected {pointer_count} pointer symbols")
    if len(offsets) != synset_count:
        raise CorruptIndexError(
            pos, lemma, f"expected {synset_count} offsets, got {len(offsets)}"
        )

    return IndexEntry(
        lemma=lemma,
        pos=pos,
        synset_count=synset_count,
        pointer_symbols=symbols,
        sense_count=sense_count,
        tagsense_count=tagsense_count,
        offsets=offsets,
    )


class IndexReader:
    """
    Lemma lookups against one index file.

    The file is read once; the lemma and line start of every entry are kept
    in sorted parallel lists so lookups and prefix scans use binary search.
    Lines are parsed only when a lemma is looked up.
    """

    def __init__(self, path: Path, pos: PartOfSpeech) -> None:
        self.path = path
        self.pos = pos
        try:
            self._content = path.read_bytes()
        except FileNotFoundError as e:
            raise MissingFileError(path) from e
        except OSError as e:
            raise MissingFileError(path, "unreadable") from e

        self._lemmas, self._starts = self._scan(self._content)
        logger.debug(f"Indexed {len(self._lemmas)} lemmas from {path}")

    def _scan(self, content: bytes) -> tuple[list[str], list[int]]:
        """Record the lemma and byte position of every entry line."""
        entries: list[tuple[str, int]] = []
        position = 0
        for line in content.splitlines(keepends=True):
            # License header lines start with a space
            if line.strip() and not line.startswith(b" "):
                lemma = line.split(maxsplit=1)[0].decode("utf-8", "replace")
                entries.append((lemma, position))
            position += len(line)

        if any(entries[i][0] > entries[i + 1][0] for i in range(len(entries) - 1)):
            logger.warning(f"{self.path} is not sorted by lemma, sorting in memory")
            entries.sort(key=lambda entry: entry[0])

        return [lemma for lemma, _ in entries], [start for _, start in entries]

    def _find(self, lemma: str) -> int | None:
        i = bisect_left(self._lemmas, lemma)
        if i < len(self._lemmas) and self._lemmas[i] == lemma:
            return i
        return None

    def _line(self, i: int) -> str:
        start = self._starts[i]
        end = self._content.find(b"\n", start)
        if end == -1:
            end = len(self._content)
        return self._content[start:end].decode("utf-8", "replace")

    def __contains__(self, lemma: object) -> bool:
        return isinstance(lemma, str) and self._find(lemma) is not None

    def __len__(self) -> int:
        return len(self._lemmas)

    def lookup(self, lemma: str) -> IndexEntry | None:
        """
        Look up a normalized lemma.

        Returns:
            The parsed entry, or None if the lemma is absent

        Raises:
            CorruptIndexError: If the lemma's line is malformed
        """
        i = self._find(lemma)
        if i is None:
            return None
        return parse_index_line(self._line(i), self.pos)

    def offsets_for(self, lemma: str) -> tuple[int, ...]:
        entry = self.lookup(lemma)
        return entry.offsets if entry else ()

    def lemmas(self) -> list[str]:
        return list(self._lemmas)

    def lemmas_with_prefix(self, prefix: str, limit: int | None = None) -> list[str]:
        """Return lemmas starting with prefix in sorted order."""
        result: list[str] = []
        i = bisect_left(self._lemmas, prefix)
        while i < len(self._lemmas) and self._lemmas[i].startswith(prefix):
            if limit is not None and len(result) >= limit:
                break
            result.append(self._lemmas[i])
            i += 1
        return result
