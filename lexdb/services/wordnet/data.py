"""Reader for the per-part-of-speech data files (data.noun, data.verb, ...)."""

import logging
import mmap
import os
import re
from pathlib import Path

from lexdb.services.wordnet.base import (
    PartOfSpeech,
    Pointer,
    RelationKind,
    Synset,
    SynsetType,
    VerbFrame,
    WordEntry,
)
from lexdb.services.wordnet.errors import CorruptSynsetError, MissingFileError

logger = logging.getLogger(__name__)

# Adjective syntactic markers: predicate, prenominal, immediately postnominal
_ADJECTIVE_MARKER = re.compile(r"^(?P<word>.+)\((?P<marker>a|p|ip)\)$")


class _Fields:
    """Sequential access to the whitespace-separated fields of a line."""

    def __init__(self, text: str) -> None:
        self._fields = text.split()
        self._index = 0

    def take(self, what: str) -> str:
        if self._index >= len(self._fields):
            raise ValueError(f"line ends before {what}")
        value = self._fields[self._index]
        self._index += 1
        return value

    def take_int(self, what: str, base: int = 10) -> int:
        value = self.take(what)
        try:
            return int(value, base)
        except ValueError:
            raise ValueError(f"{what} {value!r} is not a number") from None

    @property
    def remaining(self) -> int:
        return len(self._fields) - self._index


def _parse_word(text: str, lex_id: int) -> WordEntry:
    match = _ADJECTIVE_MARKER.match(text)
    if match:
        return WordEntry(text=match["word"], lex_id=lex_id, marker=match["marker"])
    return WordEntry(text=text, lex_id=lex_id)


def _parse_pointer(fields: _Fields, pos: PartOfSpeech) -> Pointer:
    symbol = fields.take("pointer symbol")
    target_offset = fields.take_int("pointer offset")
    target_pos = PartOfSpeech.from_tag(fields.take("pointer part of speech"))
    source_target = fields.take("pointer source/target")
    if len(source_target) != 4:
        raise ValueError(f"pointer source/target {source_target!r} is not 4 hex digits")
    return Pointer(
        symbol=symbol,
        relation=RelationKind.from_symbol(symbol, pos),
        target_offset=target_offset,
        target_pos=target_pos,
        source=int(source_target[:2], 16),
        target=int(source_target[2:], 16),
    )


def parse_synset(line: str, pos: PartOfSpeech, offset: int | None = None) -> Synset:
    """
    Parse a data line.

    Layout: synset_offset lex_filenum ss_type w_cnt word lex_id [word lex_id...]
    p_cnt [ptr...] [frames...] | gloss

    Args:
        line: The line without its trailing newline
        pos: Part of speech of the data file the line came from
        offset: The offset the line was read from, checked against its first field

    Raises:
        CorruptSynsetError: If the offset field does not match or the synset
            type belongs to another part of speech
        ValueError: If a field does not follow the layout
    """
    head, separator, gloss = line.partition("|")
    if not separator:
        raise ValueError("missing gloss separator")

    fields = _Fields(head)
    synset_offset = fields.take_int("synset offset")
    if offset is not None and synset_offset != offset:
        raise CorruptSynsetError(pos, offset, f"offset field is {synset_offset}")

    lex_filenum = fields.take_int("lexicographer file number")
    synset_type = SynsetType(fields.take("synset type"))
    if synset_type.pos is not pos:
        raise CorruptSynsetError(
            pos, synset_offset, f"synset type {synset_type.value!r} in data.{pos.suffix}"
        )

    word_count = fields.take_int("word count", 16)
    words = []
    for _ in range(word_count):
        text = fields.take("word")
        words.append(_parse_word(text, fields.take_int("lex id", 16)))

    pointer_count = fields.take_int("pointer count")
    pointers = tuple(_parse_pointer(fields, pos) for _ in range(pointer_count))

    frames = []
    if pos is PartOfSpeech.VERB and fields.remaining:
        for _ in range(fields.take_int("frame count")):
            marker = fields.take("frame marker")
            if marker != "+":
                raise ValueError(f"frame marker {marker!r} is not '+'")
            frame_number = fields.take_int("frame number")
            frames.append(VerbFrame(frame_number, fields.take_int("frame word number", 16)))

    if fields.remaining:
        raise ValueError(f"{fields.remaining} unexpected fields before gloss")

    return Synset(
        offset=synset_offset,
        pos=pos,
        lex_filenum=lex_filenum,
        synset_type=synset_type,
        words=tuple(words),
        pointers=pointers,
        gloss=gloss.strip(),
        frames=tuple(frames),
    )


class SynsetReader:
    """
    Decodes synsets from one data file by byte offset.

    The file is memory-mapped so pages are read on first touch, or read
    fully into memory when preload is set.
    """

    def __init__(self, path: Path, pos: PartOfSpeech, preload: bool = False) -> None:
        self.path = path
        self.pos = pos
        self._buffer: bytes | mmap.mmap
        try:
            with path.open("rb") as f:
                if preload:
                    self._buffer = f.read()
                elif os.fstat(f.fileno()).st_size == 0:
                    self._buffer = b""
                else:
                    self._buffer = mmap.mmap(f.fileno(), 0, access=mmap.ACCESS_READ)
        except FileNotFoundError as e:
            raise MissingFileError(path) from e
        except OSError as e:
            raise MissingFileError(path, "unreadable") from e

    def __len__(self) -> int:
        return len(self._buffer)

    def read(self, offset: int) -> Synset:
        """
        Decode the synset whose line starts at offset.

        Raises:
            CorruptSynsetError: If the offset is out of range or the line is malformed
        """
        if not 0 <= offset < len(self._buffer):
            raise CorruptSynsetError(self.pos, offset, "offset out of range")

        end = self._buffer.find(b"\n", offset)
        if end == -1:
            end = len(self._buffer)
        line = self._buffer[offset:end].decode("utf-8", "replace")

        try:
            return parse_synset(line, self.pos, offset)
        except ValueError as e:
            raise CorruptSynsetError(self.pos, offset, str(e)) from e

    def close(self) -> None:
        if isinstance(self._buffer, mmap.mmap):
            self._buffer.close()
        self._buffer = b""
