"""Pattern tokenizer.

Splits a raw pattern into parts: single separator characters and the
maximal runs of non-separator characters between them.

    "yyyy-mm-dd" -> ["yyyy", "-", "mm", "-", "dd"]
    "yyyy--mm"   -> ["yyyy", "-", "-", "mm"]
    "d mmm yy"   -> ["d", " ", "mmm", " ", "yy"]

Concatenating the parts always reproduces the input exactly. No
normalization happens here: case and spelling are the resolver's concern.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator

from datepattern.constants import SEPARATOR_CHARS

__all__ = ["iter_parts", "split_pattern"]


def iter_parts(pattern: str) -> Iterator[tuple[int, str]]:
    """Yield (offset, part) pairs for each part of the pattern.

    Args:
        pattern: Raw pattern string

    Yields:
        Tuples of the part's starting character offset and the part itself
    """
    run_start = 0
    for index, char in enumerate(pattern):
        if char not in SEPARATOR_CHARS:
            continue
        if run_start != index:
            yield (run_start, pattern[run_start:index])
        yield (index, char)
        run_start = index + 1

    if run_start < len(pattern):
        yield (run_start, pattern[run_start:])


def split_pattern(pattern: str) -> list[str]:
    """Split a pattern into raw parts.

    Args:
        pattern: Raw pattern string (e.g., "d mmm yy")

    Returns:
        Ordered list of parts; empty for the empty pattern

    Example:
        >>> split_pattern("yyyy--mm")
        ['yyyy', '-', '-', 'mm']
    """
    return [part for _, part in iter_parts(pattern)]
