"""WordNet lexical database engine."""

from lexdb.services.wordnet.base import (
    Definition,
    Lemma,
    PartOfSpeech,
    Pointer,
    RelatedSense,
    RelationKind,
    Sense,
    Synset,
    SynsetType,
    VerbFrame,
    WordEntry,
    normalize,
)
from lexdb.services.wordnet.data import SynsetReader
from lexdb.services.wordnet.errors import (
    CorruptIndexError,
    CorruptSynsetError,
    LexiconError,
    MissingFileError,
)
from lexdb.services.wordnet.index import IndexEntry, IndexReader
from lexdb.services.wordnet.lemmatizer import Lemmatizer
from lexdb.services.wordnet.relations import ALL, DanglingPointer, Expansion, RelationResolver
from lexdb.services.wordnet.service import LookupService
from lexdb.services.wordnet.store import CacheInfo, LexicalStore

__all__ = [
    "ALL",
    "CacheInfo",
    "CorruptIndexError",
    "CorruptSynsetError",
    "DanglingPointer",
    "Definition",
    "Expansion",
    "IndexEntry",
    "IndexReader",
    "Lemma",
    "Lemmatizer",
    "LexicalStore",
    "LexiconError",
    "LookupService",
    "MissingFileError",
    "PartOfSpeech",
    "Pointer",
    "RelatedSense",
    "RelationKind",
    "RelationResolver",
    "Sense",
    "Synset",
    "SynsetReader",
    "SynsetType",
    "VerbFrame",
    "WordEntry",
    "normalize",
]
