"""
Letter-case mask codec.

A mask records which letters of a token were capitals so that capitalization
can be put back on inflected forms that are produced in lower case:

    >>> LetterMask("МакДональд").apply("макдональда")
    'МакДональда'
    >>> LetterMask("ИВАНОВ").apply("иванова")
    'ИВАНОВА'
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LetterMask:
    bits: tuple[bool, ...]
    all_upper: bool

    def __init__(self, token: str):
        bits = tuple(ch != ch.lower() for ch in token)
        object.__setattr__(self, "bits", bits)
        # Caseless characters (digits, hyphens) count as upper, so "АБВ-1" stays upper.
        object.__setattr__(self, "all_upper", all(ch == ch.upper() for ch in token))

    def __len__(self) -> int:
        return len(self.bits)

    def apply(self, form: str) -> str:
        """Restore capitalization on ``form``.

        Positions beyond the mask (appended endings) are left as produced.
        """
        if self.all_upper:
            return form.upper()
        limit = min(len(form), len(self.bits))
        head = "".join(ch.upper() if upper else ch for ch, upper in zip(form[:limit], self.bits))
        return head + form[limit:]
