"""
Score types for name-part and gender inference.

Scores are exact ``Decimal`` sums. Rule packs write their weights as decimal
literals with at most two fractional digits, so equal evidence always
compares equal and the tie-break order below is reproducible.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from slavonym.types.enums import Gender, NamePart

Score = Decimal

ZERO = Decimal(0)


@dataclass(frozen=True)
class NamePartScores:
    """Likelihood of a token being a first name, a last name or a patronymic."""

    first_name: Score = ZERO
    last_name: Score = ZERO
    patronymic: Score = ZERO

    def resolve(self) -> NamePart:
        """Pick the role with the highest score.

        Ties go to the first name, then the last name; the patronymic only
        wins when it is the unique maximum.
        """
        best = max(self.first_name, self.last_name, self.patronymic)
        if self.first_name == best:
            return NamePart.FIRST_NAME
        if self.last_name == best:
            return NamePart.LAST_NAME
        return NamePart.PATRONYMIC


@dataclass(frozen=True)
class GenderScores:
    """Masculine and feminine evidence collected for one token."""

    masculine: Score = ZERO
    feminine: Score = ZERO

    def __add__(self, other: GenderScores) -> GenderScores:
        return GenderScores(self.masculine + other.masculine, self.feminine + other.feminine)

    @property
    def spread(self) -> Score:
        return abs(self.masculine - self.feminine)

    def resolve(self) -> Gender:
        # ties favor masculine
        if self.masculine >= self.feminine:
            return Gender.MASCULINE
        return Gender.FEMININE
