"""Stemming, container assembly and build orchestration."""

from .builder import build
from .containers import build_containers, build_prefix_table
from .nudger import Advisory, analyze, print_advisories
from .stems import build_stem_table, stem_word

__all__ = [
    "Advisory",
    "analyze",
    "build",
    "build_containers",
    "build_prefix_table",
    "build_stem_table",
    "print_advisories",
    "stem_word",
]
