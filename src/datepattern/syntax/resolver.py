"""Token resolution: raw pattern parts to vocabulary members.

Every part must equal the canonical spelling of exactly one Section or
Separator. Matching is exact and case-sensitive; there is no prefix or
partial matching, so "yyy" and "YYYY" are both unsupported.

Resolution fails fast: the first unsupported part raises
PartNotSupportedError and the remaining parts are never examined.

Python 3.13+.
"""

from datepattern.diagnostics import ErrorTemplate, PartNotSupportedError
from datepattern.enums import Section, Separator, Token

from .tokenizer import iter_parts

__all__ = ["VOCABULARY", "parse_pattern", "resolve_part"]

# Hand-listed so the accepted spellings are visible in one place.
# Spellings are pairwise distinct; a duplicate would make resolution ambiguous.
VOCABULARY: dict[str, Token] = {
    # Year
    "yy": Section.YY,
    "yyyy": Section.YYYY,
    # Month
    "m": Section.M,
    "mm": Section.MM,
    "mmm": Section.MMM,
    "mmmm": Section.MMMM,
    # Day
    "d": Section.D,
    "dd": Section.DD,
    "ddd": Section.DDD,
    "dddd": Section.DDDD,
    # Separators
    "/": Separator.SLASH,
    ".": Separator.PERIOD,
    "-": Separator.HYPHEN,
    " ": Separator.SPACE,
}


def resolve_part(part: str, *, position: int = 0) -> Token:
    """Resolve one raw part to its token.

    Args:
        part: Raw substring produced by the tokenizer
        position: Character offset of the part, reported on failure

    Returns:
        The Section or Separator spelled exactly as ``part``

    Raises:
        PartNotSupportedError: If no token is spelled ``part``
    """
    token = VOCABULARY.get(part)
    if token is None:
        diagnostic = ErrorTemplate.part_not_supported(part, position)
        raise PartNotSupportedError(diagnostic, part=part, position=position)
    return token


def parse_pattern(pattern: str) -> tuple[Token, ...]:
    """Tokenize and resolve a whole pattern.

    An empty result is not an error here; the renderer decides whether a
    token sequence has anything to render.

    Args:
        pattern: Raw pattern string

    Returns:
        Resolved tokens in pattern order

    Raises:
        PartNotSupportedError: On the first unsupported part

    Example:
        >>> parse_pattern("d mmm")
        (<Section.D: 'd'>, <Separator.SPACE: ' '>, <Section.MMM: 'mmm'>)
    """
    return tuple(resolve_part(part, position=offset) for offset, part in iter_parts(pattern))
