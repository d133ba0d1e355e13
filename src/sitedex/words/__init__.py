"""Word extraction and normalization for index builds."""

from .annotated_words import annotated_words_from_string
from .normalizer import normalize_document
from .punctuation import remove_surrounding_punctuation

__all__ = ["annotated_words_from_string", "normalize_document", "remove_surrounding_punctuation"]
