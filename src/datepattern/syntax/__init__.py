"""Pattern syntax: tokenizer and token resolver.

Turns a raw pattern string into an ordered tuple of vocabulary tokens.
This package has no runtime dependencies; rendering lives in
datepattern.runtime.

Public API:
    split_pattern - Split a pattern into raw parts
    iter_parts - Same, with the character offset of each part
    resolve_part - Resolve one part to a Section or Separator
    parse_pattern - Tokenize and resolve a whole pattern
    VOCABULARY - Canonical spelling -> token mapping

Python 3.13+.
"""

from .resolver import VOCABULARY, parse_pattern, resolve_part
from .tokenizer import iter_parts, split_pattern

__all__ = [
    "VOCABULARY",
    "iter_parts",
    "parse_pattern",
    "resolve_part",
    "split_pattern",
]
