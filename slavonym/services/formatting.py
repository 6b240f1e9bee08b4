"""
Output formatting for declined names.

Templates are plain strings in which ``S``, ``N`` and ``F`` stand for the
surname, first name and patronymic in the requested case; every other
character is copied as is, so ``"S N F"``, ``"N F"`` or ``"S, N"`` all work.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence

from slavonym.types import DeclensionConfig, NamePart, NameWord


class NameFormattingService:
    """Joins case forms of words and fills templates."""

    def __init__(self, config: DeclensionConfig, case_count: int):
        self._config = config
        self._case_count = case_count

    def join_cases(self, words: Sequence[NameWord]) -> list[str]:
        """Per-case forms of several words of one role joined with single spaces."""
        return [" ".join(word.forms[case] for word in words) for case in range(self._case_count)]

    def fill_template(self, template: str | None, fields: Mapping[NamePart, Sequence[str]], case: int) -> str:
        template = self._config.default_template if template is None else template
        out = []
        for symbol in template:
            role = _PLACEHOLDERS.get(symbol)
            out.append(fields[role][case] if role is not None else symbol)
        return "".join(out)

    def fill_template_all(self, template: str | None, fields: Mapping[NamePart, Sequence[str]]) -> list[str]:
        return [self.fill_template(template, fields, case) for case in range(self._case_count)]

    def words_in_case(self, words: Sequence[NameWord], case: int) -> str:
        """Words in their own order, space separated."""
        return " ".join(word.forms[case] for word in words).strip()

    def words_all_cases(self, words: Sequence[NameWord]) -> list[str]:
        return [self.words_in_case(words, case) for case in range(self._case_count)]

    @staticmethod
    def role_format(words: Sequence[NameWord]) -> str:
        """Role letters of ``words``, e.g. ``"S N F"``."""
        return " ".join(word.role.value for word in words)


_PLACEHOLDERS = {part.value: part for part in (NamePart.LAST_NAME, NamePart.FIRST_NAME, NamePart.PATRONYMIC)}
