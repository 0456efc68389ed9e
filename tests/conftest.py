"""Pytest configuration and fixtures.

The fixtures write a small database in the WordNet 3.x file layout so byte
offsets in the index and pointer fields are exact.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from lexdb.services.wordnet import LexicalStore, LookupService

LICENSE_HEADER = (
    "  1 This software and database is being provided to you, the LICENSEE, by  \n"
    "  2 Princeton University under the following license.  \n"
)

POS_SUFFIX = {"n": "noun", "v": "verb", "a": "adj", "r": "adv"}

# (symbol, target, source word, target word); target is an entry key or a
# (pos, offset) pair for pointers that must not resolve
PointerSpec = tuple[str, "str | tuple[str, int]", int, int]


@dataclass
class Entry:
    """One synset of the fixture database."""

    key: str
    pos: str
    words: list[str]
    gloss: str
    pointers: list[PointerSpec] = field(default_factory=list)
    ss_type: str | None = None
    frames: list[tuple[int, int]] = field(default_factory=list)
    lex_filenum: int = 0
    lex_ids: dict[str, int] = field(default_factory=dict)


CORPUS = [
    # Nouns; "dog" comes first so it can be placed at a chosen offset
    Entry(
        "dog",
        "n",
        ["dog", "domestic_dog", "Canis_familiaris"],
        "a member of the genus Canis (probably descended from the common wolf) that has "
        "been domesticated by man since prehistoric times; occurs in many breeds; "
        '"the dog barked all night"',
        [("@", "canine", 0, 0), ("%p", "flag", 0, 0)],
        lex_filenum=5,
    ),
    Entry(
        "frump",
        "n",
        ["frump", "dog"],
        'a dull unattractive unpleasant girl or woman; "she got a reputation as a frump"',
        [("@", "person", 0, 0)],
        lex_filenum=18,
        lex_ids={"dog": 1},
    ),
    Entry(
        "entity",
        "n",
        ["entity"],
        "that which is perceived or known or inferred to have its own distinct existence",
        [("~", "organism", 0, 0), ("~", "living_thing", 0, 0)],
        lex_filenum=3,
    ),
    Entry(
        "living_thing",
        "n",
        ["living_thing", "animate_thing"],
        "a living (or once living) entity",
        [("@", "entity", 0, 0)],
    ),
    Entry(
        "organism",
        "n",
        ["organism", "being"],
        "a living thing that has (or can develop) the ability to act or function independently",
        [("@", "entity", 0, 0), ("~", "animal", 0, 0), ("~", "person", 0, 0)],
    ),
    Entry(
        "animal",
        "n",
        ["animal", "animate_being", "beast"],
        "a living organism characterized by voluntary movement",
        [("@", "organism", 0, 0), ("~", "carnivore", 0, 0)],
    ),
    Entry(
        "carnivore",
        "n",
        ["carnivore"],
        "a terrestrial or aquatic flesh-eating mammal",
        [("@", "animal", 0, 0), ("~", "canine", 0, 0)],
    ),
    Entry(
        "canine",
        "n",
        ["canine", "canid"],
        "any of various fissiped mammals with nonretractile claws and typically long muzzles",
        [("@", "carnivore", 0, 0), ("~", "dog", 0, 0)],
    ),
    Entry(
        "flag",
        "n",
        ["flag"],
        "a conspicuously marked or shaped tail",
        [("#p", "dog", 0, 0)],
    ),
    Entry(
        "person",
        "n",
        ["person", "individual"],
        'a human being; "there was too much for one person to do"',
        [("@", "organism", 0, 0), ("~", "runner", 0, 0), ("~", "frump", 0, 0)],
    ),
    Entry(
        "runner",
        "n",
        ["runner"],
        "someone who travels on foot by running",
        [("@", "person", 0, 0), ("+", "run", 1, 1)],
    ),
    Entry("doodle", "n", ["doodle"], "a haphazard scribble"),
    Entry(
        "doom",
        "n",
        ["doom", "doomsday"],
        "an unpleasant or disastrous destiny",
        [("?x", "door", 0, 0)],
    ),
    Entry(
        "door",
        "n",
        ["door"],
        "a swinging or sliding barrier that will close the entrance to a room or building",
    ),
    Entry(
        "doorbell",
        "n",
        ["doorbell", "bell", "buzzer"],
        "a push button at an outer door that gives a ringing or buzzing signal when pushed",
    ),
    Entry("doorknob", "n", ["doorknob", "doorhandle"], "a knob used to release the catch"),
    Entry("doormat", "n", ["doormat", "welcome_mat"], "a mat placed outside an exterior door"),
    Entry("class", "n", ["class", "category"], "a collection of things sharing a common attribute"),
    Entry(
        "axe",
        "n",
        ["axe", "ax"],
        "an edge tool with a heavy bladed head mounted across a handle",
    ),
    Entry("family", "n", ["family", "household"], "a social unit living together"),
    Entry("man", "n", ["man", "adult_male"], "an adult person who is male"),
    Entry("mouse", "n", ["mouse"], "any of numerous small rodents"),
    Entry(
        "ghost",
        "n",
        ["ghost"],
        "a mental representation of some haunting experience",
        [("@", ("n", 99999999), 0, 0), ("@", "organism", 0, 0)],
    ),
    Entry(
        "spirit",
        "n",
        ["spirit", "disembodied_spirit"],
        "any incorporeal supernatural being",
        [("~", "ghost", 0, 0), ("~", "wraith", 0, 0)],
    ),
    Entry(
        "wraith",
        "n",
        ["wraith"],
        "a visible spirit of a person seen shortly before or after their death",
        [("@", ("n", 99999999), 0, 0), ("@", "spirit", 0, 0)],
    ),
    Entry(
        "glass",
        "n",
        ["glass", "drinking_glass"],
        "a container for holding liquids while drinking",
    ),
    Entry(
        "glasses",
        "n",
        ["glasses", "spectacles", "specs", "eyeglasses"],
        "optical instrument consisting of a frame that holds a pair of lenses",
    ),
    # Verbs
    Entry(
        "travel",
        "v",
        ["travel", "go", "move"],
        "change location; move, travel, or proceed",
        [("~", "run", 0, 0)],
        frames=[(1, 0)],
        lex_filenum=38,
    ),
    Entry(
        "run",
        "v",
        ["run"],
        "move fast by using one's feet, with one foot off the ground at any given time; "
        "\"Don't run--you'll be late\"",
        [("@", "travel", 0, 0), ("+", "runner", 1, 1)],
        frames=[(1, 0), (2, 0)],
        lex_filenum=38,
    ),
    Entry(
        "chase",
        "v",
        ["chase", "dog", "tail"],
        "go after with the intent to catch",
        frames=[(8, 0), (11, 2)],
        lex_filenum=38,
    ),
    # Adjectives
    Entry(
        "good",
        "a",
        ["good"],
        "having desirable or positive qualities especially those suitable for a thing specified",
        [("!", "bad", 1, 1), ("&", "beneficial", 0, 0)],
    ),
    Entry(
        "beneficial",
        "a",
        ["beneficial"],
        "promoting or contributing to personal or social well-being",
        [("&", "good", 0, 0)],
        ss_type="s",
    ),
    Entry(
        "bad",
        "a",
        ["bad"],
        "having undesirable or negative qualities",
        [("!", "good", 1, 1)],
    ),
    Entry(
        "hot",
        "a",
        ["hot"],
        "used of physical heat; having a high or higher than desirable temperature",
        [("&", "warm", 0, 0)],
    ),
    Entry(
        "warm",
        "a",
        ["warm"],
        "having or producing a comfortable and agreeable degree of heat",
        [("&", "hot", 0, 0), ("&", "tepid", 0, 0)],
        ss_type="s",
    ),
    Entry(
        "tepid",
        "a",
        ["tepid", "lukewarm"],
        "moderately warm",
        [("&", "hot", 0, 0)],
        ss_type="s",
    ),
    Entry(
        "quick",
        "a",
        ["quick", "speedy"],
        "accomplished rapidly and without delay",
        [("!", "slow", 1, 1)],
    ),
    Entry("slow", "a", ["slow"], "not moving quickly", [("!", "quick", 1, 1)]),
    Entry("afraid", "a", ["afraid(p)"], "filled with fear or apprehension"),
    Entry("galore", "a", ["galore(ip)"], "in great numbers", ss_type="s"),
    # Adverbs
    Entry(
        "quickly",
        "r",
        ["quickly", "rapidly"],
        'with rapid movements; "he works quickly"',
        [("\\", "quick", 1, 1)],
    ),
]

EXCEPTIONS = {
    "noun": "mice mouse\n",
    "verb": "ran run\n",
}

# Index lines that must fail to parse or resolve
CORRUPT_INDEX_LINES = {
    "n": [
        "broken n 1 0 1 0 notanumber  ",
        "wrongcount n 2 0 2 0 00000000  ",
        "phantom n 1 0 1 0 00000000  ",
    ],
}


def _normalize(word: str) -> str:
    return word.split("(")[0].lower()


def _render_data_line(entry: Entry, offset_of: Callable[[str], int], pos_of) -> str:
    parts = [
        f"{offset_of(entry.key):08d}",
        f"{entry.lex_filenum:02d}",
        entry.ss_type or entry.pos,
        f"{len(entry.words):02x}",
    ]
    for word in entry.words:
        parts.append(f"{word} {entry.lex_ids.get(word, 0):x}")
    parts.append(f"{len(entry.pointers):03d}")
    for symbol, target, source, target_word in entry.pointers:
        if isinstance(target, tuple):
            target_pos, target_offset = target
        else:
            target_pos, target_offset = pos_of(target), offset_of(target)
        parts.append(f"{symbol} {target_offset:08d} {target_pos} {source:02x}{target_word:02x}")
    if entry.pos == "v":
        parts.append(f"{len(entry.frames):02d}")
        for frame_number, word_number in entry.frames:
            parts.append(f"+ {frame_number:02d} {word_number:02x}")
    return " ".join(parts) + f" | {entry.gloss}  \n"


def write_wordnet(
    directory: Path,
    entries: list[Entry] | None = None,
    header_size: int | None = None,
    corrupt_index_lines: dict[str, list[str]] | None = None,
    exceptions: dict[str, str] | None = None,
) -> dict[str, int]:
    """
    Write index.*, data.* and *.exc files and return each entry's offset.

    Args:
        header_size: Pad the noun data header so the first noun entry starts
            at exactly this byte offset
    """
    entries = CORPUS if entries is None else entries
    corrupt_index_lines = CORRUPT_INDEX_LINES if corrupt_index_lines is None else corrupt_index_lines
    exceptions = EXCEPTIONS if exceptions is None else exceptions
    directory.mkdir(parents=True, exist_ok=True)

    by_key = {entry.key: entry for entry in entries}
    offsets: dict[str, int] = {}

    def pos_of(key: str) -> str:
        return by_key[key].pos

    def placeholder(key: str) -> int:
        return 0

    def offset_of(key: str) -> int:
        return offsets[key]

    headers = {}
    for pos in POS_SUFFIX:
        header = LICENSE_HEADER
        if pos == "n" and header_size is not None:
            header += " " * (header_size - len(header) - 1) + "\n"
        headers[pos] = header
        position = len(header.encode())
        for entry in entries:
            if entry.pos == pos:
                offsets[entry.key] = position
                position += len(_render_data_line(entry, placeholder, pos_of).encode())

    for pos, suffix in POS_SUFFIX.items():
        lines = [headers[pos]]
        lemmas: dict[str, list[Entry]] = {}
        for entry in entries:
            if entry.pos != pos:
                continue
            lines.append(_render_data_line(entry, offset_of, pos_of))
            for word in entry.words:
                lemmas.setdefault(_normalize(word), []).append(entry)
        (directory / f"data.{suffix}").write_text("".join(lines), encoding="utf-8")

        index_lines = list(corrupt_index_lines.get(pos, []))
        for lemma, synsets in lemmas.items():
            symbols = sorted({p[0] for synset in synsets for p in synset.pointers})
            fields = [lemma, pos, str(len(synsets)), str(len(symbols)), *symbols]
            fields += [str(len(synsets)), "0", *(f"{offsets[s.key]:08d}" for s in synsets)]
            index_lines.append(" ".join(fields) + "  ")
        index_lines.sort(key=lambda line: line.split()[0])
        content = LICENSE_HEADER + "".join(f"{line}\n" for line in index_lines)
        (directory / f"index.{suffix}").write_text(content, encoding="utf-8")

    for suffix, content in exceptions.items():
        (directory / f"{suffix}.exc").write_text(content, encoding="utf-8")

    return offsets


@pytest.fixture
def build_wordnet() -> Callable[..., dict[str, int]]:
    """Factory writing a fixture database to a given directory."""
    return write_wordnet


@pytest.fixture
def wordnet_dir(tmp_path: Path) -> Path:
    """A directory holding the fixture database."""
    directory = tmp_path / "dict"
    write_wordnet(directory)
    return directory


@pytest.fixture
def offsets(tmp_path: Path) -> dict[str, int]:
    """Byte offset of every fixture synset, keyed by entry key."""
    return write_wordnet(tmp_path / "layout")


@pytest.fixture
def store(wordnet_dir: Path) -> Iterator[LexicalStore]:
    """A store over the fixture database."""
    with LexicalStore(wordnet_dir) as store:
        yield store


@pytest.fixture
def service(store: LexicalStore) -> LookupService:
    """A lookup service over the fixture store."""
    return LookupService(store, completion_limit=5)
