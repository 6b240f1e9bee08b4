"""
Word entity: one registered name token and everything computed for it.
"""
from __future__ import annotations

from slavonym.types.enums import Gender, NamePart
from slavonym.types.results import NO_RULE
from slavonym.types.scores import GenderScores
from slavonym.utils.letter_mask import LetterMask


class NameWord:
    """A single name token.

    ``original``, ``normalized`` and ``mask`` are fixed at construction. The
    role, gender and case forms are filled in by the engine while it prepares
    a declension and are cleared again when the set of tokens changes.
    """

    __slots__ = (
        "original",
        "normalized",
        "mask",
        "role",
        "role_explicit",
        "gender_scores",
        "_gender",
        "gender_forced",
        "forms",
        "rule_id",
    )

    def __init__(self, original: str, role: NamePart = NamePart.UNSET):
        if not isinstance(original, str):
            raise TypeError(f"name token must be a str, got {type(original).__name__}")
        self.original = original
        self.normalized = original.lower()
        self.mask = LetterMask(original)
        self.role = role
        self.role_explicit = role is not NamePart.UNSET
        self.gender_scores = GenderScores()
        self._gender = Gender.UNRESOLVED
        self.gender_forced = False
        self.forms: tuple[str, ...] = ()
        self.rule_id = NO_RULE

    def __repr__(self) -> str:
        return f"NameWord({self.original!r}, role={self.role.name}, gender={self._gender.name})"

    @property
    def is_gender_solved(self) -> bool:
        return self._gender is not Gender.UNRESOLVED

    @property
    def gender(self) -> Gender:
        """Assigned gender, or the one the current evidence points to.

        Reading never assigns; only `set_gender` and `force_gender` do.
        """
        if self._gender is Gender.UNRESOLVED:
            return self.gender_scores.resolve()
        return self._gender

    def set_gender(self, gender: Gender) -> None:
        self._gender = Gender(gender)

    def force_gender(self, gender: Gender) -> None:
        """Caller-supplied gender; kept when the engine invalidates the word."""
        self._gender = Gender(gender)
        self.gender_forced = self._gender is not Gender.UNRESOLVED

    def set_role(self, role: NamePart) -> None:
        if self.role is NamePart.UNSET:
            self.role = role

    def set_forms(self, forms, rule_id: int, *, apply_mask: bool = True) -> None:
        """Store the case forms; the nominative is always the original token."""
        if apply_mask:
            forms = [self.mask.apply(form) for form in forms]
        forms = list(forms)
        if forms:
            forms[0] = self.original
        self.forms = tuple(forms)
        self.rule_id = rule_id

    def form(self, case: int) -> str:
        return self.forms[case]

    def invalidate(self) -> None:
        """Drop inferred state; caller-supplied role and forced gender survive."""
        if not self.role_explicit:
            self.role = NamePart.UNSET
        self.gender_scores = GenderScores()
        if not self.gender_forced:
            self._gender = Gender.UNRESOLVED
        self.forms = ()
        self.rule_id = NO_RULE


def ensure_word(value) -> NameWord:
    if not isinstance(value, NameWord):
        raise TypeError(f"expected NameWord, got {type(value).__name__}")
    return value
