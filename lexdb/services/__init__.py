"""Services for dictionary lookups."""

from lexdb.services.tokenizer import Tokenizer
from lexdb.services.wordnet import LexicalStore, LookupService

__all__ = ["LexicalStore", "LookupService", "Tokenizer"]
