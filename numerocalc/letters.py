"""Latin Pythagorean letter table.

A=1 B=2 C=3 D=4 E=5 F=6 G=7 H=8 I=9
J=1 K=2 L=3 M=4 N=5 O=6 P=7 Q=8 R=9
S=1 T=2 U=3 V=4 W=5 X=6 Y=7 Z=8
"""
from __future__ import annotations

import re

# Y counts as a consonant.
VOWELS: frozenset[str] = frozenset("AEIOU")

_NON_LATIN_RE = re.compile(r"[^A-Z]")


def letter_value(char: str) -> int:
    """Return the 1-9 value of an uppercase Latin letter, 0 for anything else."""
    if len(char) != 1 or not "A" <= char <= "Z":
        return 0
    return (ord(char) - ord("A")) % 9 + 1


def is_vowel(char: str) -> bool:
    return char in VOWELS


def normalize_name(text: str) -> str:
    return _NON_LATIN_RE.sub("", text.upper())
