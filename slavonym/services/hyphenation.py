"""
Declension of single tokens, splitting compound surnames on hyphens.

"Петров-Водкин" declines both halves ("Петрова-Водкина"), while in
"Жан-Петров" or "Тулуз-Лотрек" only the last part changes: a leading part is
declined only when, taken on its own, it classifies as a surname and it is
not listed in ``DeclensionConfig.hyphen_exclusions``.

Leading parts are classified by the pack named in
``DeclensionConfig.hyphen_classifier_language`` (Russian by default), whatever
language declines the word. The Russian signals recognize surname halves such
as "Нечуй" in "Нечуй-Левицький" that the Ukrainian ones score as first names.
"""
from __future__ import annotations

from slavonym.services.inference import InferenceService
from slavonym.services.rules import RuleChainEvaluator
from slavonym.types import DeclensionConfig, Gender, NamePart, NameWord, RuleOutcome, ensure_word
from slavonym.utils.letter_mask import LetterMask


class HyphenSplitter:
    def __init__(self, config: DeclensionConfig, evaluator: RuleChainEvaluator, leading_parts: InferenceService):
        self._config = config
        self._evaluator = evaluator
        self._leading_parts = leading_parts

    @property
    def case_count(self) -> int:
        return self._evaluator.pack.case_count

    def split(self, word: NameWord) -> list[str]:
        if word.role is NamePart.LAST_NAME:
            return word.original.split("-")
        return [word.original]

    def decline_word(self, word: NameWord) -> RuleOutcome:
        """Decline ``word`` with its resolved gender and store the forms on it.

        The diagnostic rule id is the one of the last hyphen part.
        """
        ensure_word(word)
        parts = self.split(word)
        outcomes = [
            self.decline_part(part, word.gender, word.role, leading=index < len(parts) - 1)
            for index, part in enumerate(parts)
        ]
        joined = ["-".join(outcome.forms[case] for outcome in outcomes) for case in range(self.case_count)]
        last = outcomes[-1]
        word.set_forms(joined, last.rule_id, apply_mask=False)
        return RuleOutcome(word.forms, last.rule_id, last.matched)

    def decline_part(self, part: str, gender: Gender, role: NamePart, *, leading: bool = False) -> RuleOutcome:
        """Decline one hyphen part, returning forms with capitalization restored."""
        lowered = part.lower()
        if not part:
            return RuleOutcome.unchanged(part, self.case_count)
        if leading and not self.is_declinable_leading_part(lowered):
            return RuleOutcome.unchanged(part, self.case_count)

        outcome = self._evaluator.evaluate(lowered, gender, role)
        if not outcome.matched:
            return RuleOutcome.unchanged(part, self.case_count)

        mask = LetterMask(part)
        forms = [mask.apply(form) for form in outcome.forms]
        forms[0] = part
        return RuleOutcome.declined(forms, outcome.rule_id)

    def is_declinable_leading_part(self, lowered: str) -> bool:
        if lowered in self._config.hyphen_exclusions:
            return False
        return self._leading_parts.classify_token(lowered) is NamePart.LAST_NAME
