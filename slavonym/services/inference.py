"""
Inference combiners: name-part classification and person-level gender.

Both combiners only aggregate; the weighted signals themselves come from the
active rule pack (``RulePack.classifier`` and ``RulePack.gender_scorers``).
"""
from __future__ import annotations

import logging
from collections.abc import Sequence

from slavonym.services.rules import RulePack
from slavonym.types import ZERO, Gender, GenderScores, NamePart, NameWord, Score, ensure_word


class InferenceService:
    """Fills in roles and the uniform gender of a list of words."""

    def __init__(self, pack: RulePack):
        self._pack = pack

    def classify_token(self, token: str) -> NamePart:
        """Role of an isolated lower-cased token (first name on a tie)."""
        return self._pack.classify(token).resolve()

    def classify_word(self, word: NameWord) -> NamePart:
        ensure_word(word)
        if word.role is NamePart.UNSET:
            word.set_role(self.classify_token(word.normalized))
            logging.debug(f"'{word.original}' classified as {word.role.name}")
        return word.role

    def classify_all(self, words: Sequence[NameWord]) -> None:
        for word in words:
            self.classify_word(word)

    def score_word(self, word: NameWord) -> GenderScores:
        ensure_word(word)
        if not word.is_gender_solved:
            word.gender_scores = self._pack.score_gender(word.normalized, word.role)
        return word.gender_scores

    def resolve_gender(self, words: Sequence[NameWord]) -> Gender:
        """Give every word the same gender and return it.

        A word that already carries a gender (forced by the caller or resolved
        earlier) decides for all. Otherwise the evidence of all words is summed
        and the larger side wins, masculine on a tie.
        """
        if not words:
            return Gender.UNRESOLVED

        for word in words:
            if ensure_word(word).is_gender_solved:
                gender = word.gender
                break
        else:
            total = GenderScores()
            for word in words:
                total = total + self.score_word(word)
            gender = total.resolve()
            logging.debug(f"gender evidence m={total.masculine} f={total.feminine} -> {gender.name}")

        for word in words:
            word.set_gender(gender)
        return gender

    @staticmethod
    def gender_confidence(words: Sequence[NameWord]) -> Score:
        """Largest masculine/feminine spread of any single word."""
        return max((word.gender_scores.spread for word in words), default=ZERO)
