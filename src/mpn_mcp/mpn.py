"""MPN normalization.

Two forms are used:

- canonical: surrounding whitespace stripped, upper-cased. Hyphens, slashes, dots and
  inner spaces are kept because they often separate the package/ordering suffix
  ("LM358-D", "PIC16F84A-04/P", "AMS1117-3.3"). Every public entry point works on
  this form.
- compact: canonical with everything except A-Z/0-9 removed. Only used to decide
  whether two spellings denote the same part ("LM358-N" vs "LM358N").
"""

import re

_NON_ALNUM = re.compile(r"[^A-Z0-9]")
_FIRST_DIGIT_RUN = re.compile(r"^((?:[0-9][A-Z])?[^0-9]*[0-9]+)")
_TRAILING_LETTERS = re.compile(r"[0-9]([A-Z]+)$")


def canonical(mpn: object) -> str:
    """Canonical form, or "" for None/non-string/blank input."""
    if not isinstance(mpn, str):
        return ""
    return mpn.strip().upper()


def compact(mpn: object) -> str:
    return _NON_ALNUM.sub("", canonical(mpn))


def same_part(mpn1: object, mpn2: object) -> bool:
    """True when both are non-empty and differ only in punctuation/case."""
    c1 = compact(mpn1)
    return bool(c1) and c1 == compact(mpn2)


def series_prefix(mpn: str) -> str:
    """Prefix up to and including the first run of digits: 'LM358N' -> 'LM358'.

    A leading digit-letter designator (1N, 2N, 2S) belongs to the prefix, so
    '1N4148W' -> '1N4148'. Strings without digits are returned whole.
    """
    match = _FIRST_DIGIT_RUN.match(mpn)
    return match.group(1) if match else mpn


def trailing_letters(mpn: str) -> str:
    """Letters after the last digit: 'NE555P' -> 'P', 'LM358' -> ''."""
    match = _TRAILING_LETTERS.search(mpn)
    return match.group(1) if match else ""


def hyphen_suffix(mpn: str) -> str:
    """Segment after the last hyphen, or "" when there is none."""
    if "-" not in mpn:
        return ""
    return mpn.rsplit("-", 1)[1]
