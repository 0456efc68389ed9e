"""Core records for the WordNet lexical database."""

import re
from dataclasses import dataclass, field
from enum import Enum

_WHITESPACE = re.compile(r"\s+")


def normalize(word: str) -> str:
    """Normalize a surface form to the on-disk lemma convention.

    Lower-cases, trims, and joins inner whitespace with underscores,
    so "Living Thing" becomes "living_thing".
    """
    return _WHITESPACE.sub("_", word.strip().lower())


class PartOfSpeech(Enum):
    """Part of speech, valued by its on-disk tag."""

    NOUN = "n"
    VERB = "v"
    ADJECTIVE = "a"
    ADVERB = "r"

    @property
    def suffix(self) -> str:
        """File name suffix, e.g. data.adj."""
        return _SUFFIXES[self]

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def from_tag(cls, tag: str) -> "PartOfSpeech":
        """Parse a pos or synset-type tag; the satellite tag "s" is an adjective."""
        if tag == "s":
            return cls.ADJECTIVE
        return cls(tag)

    @classmethod
    def parse(cls, text: str) -> "PartOfSpeech":
        """Parse a tag, suffix or name ("n", "adj", "adverb")."""
        key = text.strip().lower()
        for pos in cls:
            if key in (pos.value, pos.suffix, pos.label):
                return pos
        return cls.from_tag(key)


_SUFFIXES = {
    PartOfSpeech.NOUN: "noun",
    PartOfSpeech.VERB: "verb",
    PartOfSpeech.ADJECTIVE: "adj",
    PartOfSpeech.ADVERB: "adv",
}


class SynsetType(Enum):
    NOUN = "n"
    VERB = "v"
    ADJECTIVE = "a"
    ADJECTIVE_SATELLITE = "s"
    ADVERB = "r"

    @property
    def pos(self) -> PartOfSpeech:
        return PartOfSpeech.from_tag(self.value)


class RelationKind(Enum):
    """Semantic or lexical relation encoded by a pointer symbol."""

    ANTONYM = "antonym"
    HYPERNYM = "hypernym"
    INSTANCE_HYPERNYM = "instance hypernym"
    HYPONYM = "hyponym"
    INSTANCE_HYPONYM = "instance hyponym"
    MEMBER_HOLONYM = "member holonym"
    SUBSTANCE_HOLONYM = "substance holonym"
    PART_HOLONYM = "part holonym"
    MEMBER_MERONYM = "member meronym"
    SUBSTANCE_MERONYM = "substance meronym"
    PART_MERONYM = "part meronym"
    ATTRIBUTE = "attribute"
    DERIVATIONALLY_RELATED_FORM = "derivationally related form"
    DOMAIN_TOPIC = "domain of synset topic"
    MEMBER_OF_DOMAIN_TOPIC = "member of domain topic"
    DOMAIN_REGION = "domain of synset region"
    MEMBER_OF_DOMAIN_REGION = "member of domain region"
    DOMAIN_USAGE = "domain of synset usage"
    MEMBER_OF_DOMAIN_USAGE = "member of domain usage"
    ENTAILMENT = "entailment"
    CAUSE = "cause"
    ALSO_SEE = "also see"
    VERB_GROUP = "verb group"
    SIMILAR_TO = "similar to"
    PARTICIPLE_OF_VERB = "participle of verb"
    PERTAINYM = "pertainym"
    DERIVED_FROM_ADJECTIVE = "derived from adjective"
    OTHER = "other"

    @classmethod
    def from_symbol(cls, symbol: str, pos: PartOfSpeech | None = None) -> "RelationKind":
        """Map a pointer symbol to its relation.

        The backslash symbol is a pertainym on adjectives but "derived from
        adjective" on adverbs. Unknown symbols map to OTHER.
        """
        if symbol == "\\" and pos is PartOfSpeech.ADVERB:
            return cls.DERIVED_FROM_ADJECTIVE
        return POINTER_SYMBOLS.get(symbol, cls.OTHER)

    @classmethod
    def parse(cls, text: str) -> "RelationKind":
        """Parse a relation name ("part-meronym", "Hypernym") or pointer symbol."""
        if text in POINTER_SYMBOLS:
            return POINTER_SYMBOLS[text]
        key = re.sub(r"[-_\s]+", " ", text.strip().lower())
        for kind in cls:
            if key == kind.value:
                return kind
        raise ValueError(f"Unknown relation: {text!r}")


POINTER_SYMBOLS: dict[str, RelationKind] = {
    "!": RelationKind.ANTONYM,
    "@": RelationKind.HYPERNYM,
    "@i": RelationKind.INSTANCE_HYPERNYM,
    "~": RelationKind.HYPONYM,
    "~i": RelationKind.INSTANCE_HYPONYM,
    "#m": RelationKind.MEMBER_HOLONYM,
    "#s": RelationKind.SUBSTANCE_HOLONYM,
    "#p": RelationKind.PART_HOLONYM,
    "%m": RelationKind.MEMBER_MERONYM,
    "%s": RelationKind.SUBSTANCE_MERONYM,
    "%p": RelationKind.PART_MERONYM,
    "=": RelationKind.ATTRIBUTE,
    "+": RelationKind.DERIVATIONALLY_RELATED_FORM,
    ";c": RelationKind.DOMAIN_TOPIC,
    "-c": RelationKind.MEMBER_OF_DOMAIN_TOPIC,
    ";r": RelationKind.DOMAIN_REGION,
    "-r": RelationKind.MEMBER_OF_DOMAIN_REGION,
    ";u": RelationKind.DOMAIN_USAGE,
    "-u": RelationKind.MEMBER_OF_DOMAIN_USAGE,
    "*": RelationKind.ENTAILMENT,
    ">": RelationKind.CAUSE,
    "^": RelationKind.ALSO_SEE,
    "$": RelationKind.VERB_GROUP,
    "&": RelationKind.SIMILAR_TO,
    "<": RelationKind.PARTICIPLE_OF_VERB,
    "\\": RelationKind.PERTAINYM,
}

SynsetKey = tuple[PartOfSpeech, int]


@dataclass(frozen=True)
class Lemma:
    """A normalized word keyed by part of speech."""

    text: str
    pos: PartOfSpeech

    @property
    def display(self) -> str:
        return self.text.replace("_", " ")

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class WordEntry:
    """One member word of a synset."""

    text: str  # as written on disk, case preserved
    lex_id: int
    marker: str | None = None  # adjective syntactic marker: p, a or ip

    @property
    def lemma(self) -> str:
        return normalize(self.text)


@dataclass(frozen=True)
class Pointer:
    """A typed edge to another synset, or between two words when source is set."""

    symbol: str
    relation: RelationKind
    target_offset: int
    target_pos: PartOfSpeech
    source: int = 0  # 1-based word number in the source synset, 0 for the whole synset
    target: int = 0

    @property
    def is_lexical(self) -> bool:
        return self.source != 0 or self.target != 0

    @property
    def target_key(self) -> SynsetKey:
        return (self.target_pos, self.target_offset)


@dataclass(frozen=True)
class VerbFrame:
    frame_number: int
    word_number: int  # 0 applies to every word in the synset


@dataclass(frozen=True)
class Synset:
    """A decoded data file entry."""

    offset: int
    pos: PartOfSpeech
    lex_filenum: int
    synset_type: SynsetType
    words: tuple[WordEntry, ...]
    pointers: tuple[Pointer, ...]
    gloss: str
    frames: tuple[VerbFrame, ...] = ()

    @property
    def key(self) -> SynsetKey:
        return (self.pos, self.offset)

    @property
    def lemma_names(self) -> list[str]:
        return [w.lemma for w in self.words]

    def word(self, number: int) -> WordEntry:
        """Return the member word for a 1-based pointer word number."""
        return self.words[number - 1]

    def pointers_for(self, kind: RelationKind) -> list[Pointer]:
        return [p for p in self.pointers if p.relation is kind]


@dataclass(frozen=True)
class Sense:
    """One meaning of one word."""

    lemma: Lemma
    synset: Synset
    sense_number: int | None = None

    @property
    def key(self) -> SynsetKey:
        return self.synset.key

    @property
    def definition(self) -> str:
        return self.synset.gloss

    @property
    def synonyms(self) -> list[str]:
        """Other words sharing this sense, in synset order."""
        seen = {self.lemma.text}
        result = []
        for name in self.synset.lemma_names:
            if name not in seen:
                seen.add(name)
                result.append(name)
        return result


@dataclass(frozen=True)
class RelatedSense:
    """A sense reached by following pointers from another sense."""

    sense: Sense
    relation: RelationKind
    symbol: str
    distance: int = 1

    @property
    def lemma(self) -> Lemma:
        return self.sense.lemma

    @property
    def key(self) -> SynsetKey:
        return self.sense.key


@dataclass(frozen=True)
class Definition:
    """A sense with its outgoing relations grouped by kind."""

    sense: Sense
    relations: dict[RelationKind, list[RelatedSense]] = field(default_factory=dict)

    def words_for(self, kind: RelationKind) -> list[str]:
        return [r.lemma.text for r in self.relations.get(kind, [])]
