"""Quickstart example for datepattern.

Demonstrates the result-tuple API, the raising API and parsing a pattern
once to render many dates.

Note: Examples print the errors tuple directly. In production, check it
and report the diagnostics to the user.
"""

from datetime import date, timedelta

from datepattern import (
    PartNotSupportedError,
    format_date,
    format_date_strict,
    parse_pattern,
    render,
)

today = date(2024, 3, 2)

# Example 1: Simple patterns
print("=" * 50)
print("Example 1: Simple Patterns")
print("=" * 50)

for pattern in ("yyyy-mm-dd", "d mmm yy", "dddd d mmmm yyyy", "dd/mm/yyyy"):
    result, errors = format_date(today, pattern)
    print(f"{pattern!r:24} -> {result}")
# Output:
# 'yyyy-mm-dd'             -> 2024-03-02
# 'd mmm yy'               -> 2 Mar 24
# 'dddd d mmmm yyyy'       -> Saturday 2 March 2024
# 'dd/mm/yyyy'             -> 02/03/2024

# Example 2: Errors come back in the tuple
print("\n" + "=" * 50)
print("Example 2: Errors")
print("=" * 50)

for pattern in ("yy-qq", "", "dddd, mmmm d"):
    result, errors = format_date(today, pattern)
    for error in errors:
        print(f"{pattern!r:16} -> {type(error).__name__}: {error}")
# Output:
# 'yy-qq'          -> PartNotSupportedError: Part not supported: qq
# ''               -> NoPartFoundError: No part found
# 'dddd, mmmm d'   -> PartNotSupportedError: Part not supported: dddd,

# Example 3: Raising API with diagnostics
print("\n" + "=" * 50)
print("Example 3: Raising API")
print("=" * 50)

try:
    format_date_strict(today, "yyyy.MM.dd")
except PartNotSupportedError as e:
    assert e.diagnostic is not None
    print(e.diagnostic.format_error())
# Output:
# error[PART_NOT_SUPPORTED]: Part not supported: MM
#   --> column 6
#   = help: Use one of: yy, yyyy, m, mm, mmm, mmmm, d, dd, ddd, dddd, ...

# Example 4: Parse once, render a week
print("\n" + "=" * 50)
print("Example 4: Parse Once, Render Many")
print("=" * 50)

tokens = parse_pattern("ddd d mmm")
for offset in range(7):
    print(render(tokens, today + timedelta(days=offset)))
# Output:
# Sat 2 Mar
# Sun 3 Mar
# ...
