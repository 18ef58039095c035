r"""
Suitability score of a driver for a shipment destination.

The base score depends on the parity of the length of the destination's street
name:

- even: the number of vowels in the driver's name, multiplied by 1.5;
- odd: the number of consonants in the driver's name.

When the lengths of the driver's name and the destination share a common factor
besides 1, the base score is increased by 50%.
"""

from __future__ import annotations

import math
import re
import typing as T

__all__ = [
    "street_name",
    "count_vowels",
    "count_consonants",
    "factors",
    "shares_common_factor",
    "suitability_score",
]

# Words that are neither the first (house number) nor the last (suffix) token
_STREET_WORDS: T.Final = re.compile(r"(?<=.)\b\w+\b(?![^\s]*$)", re.MULTILINE)
_VOWELS: T.Final = re.compile(r"[aeiou]", re.IGNORECASE)
_CONSONANTS: T.Final = re.compile(r"[bcdfghjklmnpqrstvwxyz]", re.IGNORECASE)
_WHITESPACE: T.Final = re.compile(r"\s+")


def street_name(address: str) -> str:
    """
    Extract the street name from a comma separated address line, lower-cased and
    without whitespace, e.g. ``"44 Fake Dr., San Diego"`` gives ``"fake"``.
    """
    street = address.split(",", 1)[0]
    return "".join(_STREET_WORDS.findall(street)).lower()


def count_vowels(text: str) -> int:
    return len(_VOWELS.findall(text))


def count_consonants(text: str) -> int:
    return len(_CONSONANTS.findall(text))


def factors(number: int) -> set[int]:
    """
    All factors of ``number`` except 1.
    """
    found: set[int] = set()
    for i in range(1, math.isqrt(number) + 1):
        if number % i == 0:
            found.add(i)
            found.add(number // i)
    found.discard(1)
    return found


def shares_common_factor(driver: str, address: str) -> bool:
    """
    Whether the lengths of the driver's name and the address, ignoring whitespace,
    share any factor besides 1.
    """
    driver_factors = factors(len(_WHITESPACE.sub("", driver)))
    address_factors = factors(len(_WHITESPACE.sub("", address)))
    return not driver_factors.isdisjoint(address_factors)


def suitability_score(driver: str, address: str) -> float:
    """
    Suitability score (SS) of assigning ``driver`` to the shipment destined for
    ``address``. Higher is better, zero means unsuitable.
    """
    if len(street_name(address)) % 2 == 0:
        score = count_vowels(driver) * 1.5
    else:
        score = float(count_consonants(driver))

    if shares_common_factor(driver, address):
        score *= 1.5
    return score
