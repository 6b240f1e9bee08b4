"""
Personal Name Declension Engine

This module declines Russian and Ukrainian personal names (first name, surname,
patronymic) into every grammatical case of the language, inferring the role of
unlabeled tokens and the gender of the person when they are not given.

## Overview

The core functionality is provided by the `NameCaseEngine` class. Names are
registered field by field or as one free-text string, then prepared lazily in
four steps the first time a query needs them:

1. **Name-part classification**: tokens without a caller-supplied role are
   scored as first name, surname or patronymic
2. **Gender resolution**: one gender is chosen for the whole person and given
   to every token
3. **Indexing**: tokens are grouped by role
4. **Declension**: every token is run through the rule chain of its gender
   and role; hyphenated surnames are declined part by part

Registering another token sends the engine back to the start, so a query
always reflects every registered token.

## Usage Examples

```python
engine = NameCaseEngine("ru")

engine.q("Облогин Денис", RussianCase.GENITIVE)
# Returns: "Облогина Дениса"

engine.set_full_name("Иванов", "Петр", "Сергеевич").formatted(1, "S N F")
# Returns: "Иванова Петра Сергеевича"

engine.q_first_name("Ольга")
# Returns: ["Ольга", "Ольги", "Ольге", "Ольгу", "Ольгой", "Ольге"]

engine.detect_gender("Иванова Мария Петровна")
# Returns: Gender.FEMININE

NameCaseEngine("uk").q("Шевченко Тарас", UkrainianCase.DATIVE)
# Returns: "Шевченкові Тарасові"
```

## Thread Safety

An engine holds mutable per-task state and must not be shared between threads.
Engines are cheap; create one per task, or use
`create_persistent_multiprocess_pool` for large batches.
"""

import logging

from slavonym import __version__
from slavonym.languages import get_rule_pack
from slavonym.services import (
    HyphenSplitter,
    InferenceService,
    NameFormattingService,
    PersistentMultiprocessDecliner,
    RuleChainEvaluator,
    RulePack,
    decline_names_multiprocess,
)
from slavonym.types import (
    ROLES,
    ZERO,
    DeclensionConfig,
    Gender,
    NamePart,
    NameWord,
    Readiness,
    Score,
    ensure_word,
)


class NameCaseEngine:
    """Declension engine bound to one language rule pack."""

    def __init__(self, language: str | RulePack | None = None, config: DeclensionConfig | None = None):
        self._config = config or DeclensionConfig.create_default()
        if isinstance(language, RulePack):
            language.validate()
            self._pack = language
        else:
            self._pack = get_rule_pack(language or self._config.language)

        self._evaluator = RuleChainEvaluator(self._pack)
        self._inference = InferenceService(self._pack)
        self._splitter = HyphenSplitter(
            self._config,
            self._evaluator,
            InferenceService(get_rule_pack(self._config.hyphen_classifier_language)),
        )
        self._formatter = NameFormattingService(self._config, self._pack.case_count)

        self._words: list[NameWord] = []
        self._index: dict[NamePart, list[int]] = {role: [] for role in ROLES}
        self._readiness = Readiness.DIRTY
        self._gender_confidence: Score = ZERO

    def __repr__(self) -> str:
        names = " ".join(word.original for word in self._words)
        return f"NameCaseEngine(language={self.language!r}, words={names!r}, readiness={self._readiness.name})"

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def config(self) -> DeclensionConfig:
        return self._config

    @property
    def pack(self) -> RulePack:
        return self._pack

    @property
    def language(self) -> str:
        return self._pack.language

    @property
    def case_count(self) -> int:
        return self._pack.case_count

    @property
    def readiness(self) -> Readiness:
        return self._readiness

    @property
    def words(self) -> tuple[NameWord, ...]:
        return tuple(self._words)

    @property
    def version(self) -> str:
        return __version__

    @property
    def language_version(self) -> str:
        """Build identifier of the active rule pack."""
        return self._pack.build

    @property
    def gender_confidence(self) -> Score:
        """Spread between masculine and feminine evidence behind the detected gender."""
        self._advance_to(Readiness.GENDER_RESOLVED)
        return self._gender_confidence

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def full_reset(self) -> "NameCaseEngine":
        """Forget every registered token."""
        self._words = []
        self._invalidate()
        return self

    def set_first_name(self, first_name: str | None = "") -> "NameCaseEngine":
        return self._register(first_name, NamePart.FIRST_NAME)

    def set_last_name(self, last_name: str | None = "") -> "NameCaseEngine":
        return self._register(last_name, NamePart.LAST_NAME)

    def set_patronymic(self, patronymic: str | None = "") -> "NameCaseEngine":
        return self._register(patronymic, NamePart.PATRONYMIC)

    def set_name(self, first_name: str | None = "") -> "NameCaseEngine":
        return self.set_first_name(first_name)

    def set_surname(self, last_name: str | None = "") -> "NameCaseEngine":
        return self.set_last_name(last_name)

    def set_full_name(
        self,
        last_name: str | None = "",
        first_name: str | None = "",
        patronymic: str | None = "",
    ) -> "NameCaseEngine":
        self.set_first_name(first_name)
        self.set_last_name(last_name)
        self.set_patronymic(patronymic)
        return self

    def set_gender(self, gender: Gender) -> "NameCaseEngine":
        """Force the gender of every registered token.

        ``Gender.UNRESOLVED`` removes a previously forced gender.
        """
        gender = Gender(gender)
        for word in self._words:
            word.force_gender(gender)
        self._invalidate()
        return self

    def _register(self, text: str | None, role: NamePart) -> "NameCaseEngine":
        if text is None or text == "":
            return self
        if not isinstance(text, str):
            raise TypeError(f"{role.name.lower()} must be a str, got {type(text).__name__}")
        self._words.append(NameWord(text, role))
        self._invalidate()
        return self

    def _invalidate(self) -> None:
        for word in self._words:
            word.invalidate()
        self._index = {role: [] for role in ROLES}
        self._gender_confidence = ZERO
        self._readiness = Readiness.DIRTY

    # ------------------------------------------------------------------
    # Preparation
    # ------------------------------------------------------------------

    def _advance_to(self, target: Readiness) -> None:
        if self._readiness < Readiness.PARTS_CLASSIFIED <= target:
            self._inference.classify_all(self._words)
            self._set_readiness(Readiness.PARTS_CLASSIFIED)

        if self._readiness < Readiness.GENDER_RESOLVED <= target:
            self._inference.resolve_gender(self._words)
            self._gender_confidence = self._inference.gender_confidence(self._words)
            self._set_readiness(Readiness.GENDER_RESOLVED)

        if self._readiness < Readiness.INDEXED <= target:
            self._index = {role: [] for role in ROLES}
            for position, word in enumerate(self._words):
                self._index[word.role].append(position)
            self._set_readiness(Readiness.INDEXED)

        if self._readiness < Readiness.DECLINED <= target:
            for word in self._words:
                self._splitter.decline_word(word)
            self._set_readiness(Readiness.DECLINED)

    def _set_readiness(self, readiness: Readiness) -> None:
        logging.debug(f"engine {self._readiness.name} -> {readiness.name}")
        self._readiness = readiness

    def prepare(self) -> "NameCaseEngine":
        """Classify, resolve gender and index without declining."""
        self._advance_to(Readiness.INDEXED)
        return self

    def decline_all(self) -> "NameCaseEngine":
        self._advance_to(Readiness.DECLINED)
        return self

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _check_case(self, case: int | None) -> int | None:
        if case is None:
            return None
        if isinstance(case, bool) or not isinstance(case, int):
            raise TypeError(f"case index must be an int, got {type(case).__name__}")
        if not 0 <= case < self.case_count:
            raise ValueError(f"case index {case} out of range for {self.case_count} cases of '{self.language}'")
        return int(case)

    def word_cases(self, word: NameWord, case: int | None = None) -> str | list[str]:
        """Case forms of one registered word."""
        ensure_word(word)
        case = self._check_case(case)
        self._advance_to(Readiness.DECLINED)
        return list(word.forms) if case is None else word.forms[case]

    def _role_cases(self, role: NamePart) -> list[str]:
        words = [self._words[position] for position in self._index[role]]
        if not words:
            return [""] * self.case_count
        return self._formatter.join_cases(words)

    def decline_field(self, role: NamePart, case: int | None = None) -> str | list[str]:
        """All tokens of ``role`` in one case, or in every case when ``case`` is None."""
        role = NamePart(role)
        if role is NamePart.UNSET:
            raise ValueError("cannot decline tokens without a role")
        case = self._check_case(case)
        self._advance_to(Readiness.DECLINED)
        cases = self._role_cases(role)
        return cases if case is None else cases[case]

    def first_name_case(self, case: int | None = None) -> str | list[str]:
        return self.decline_field(NamePart.FIRST_NAME, case)

    def last_name_case(self, case: int | None = None) -> str | list[str]:
        return self.decline_field(NamePart.LAST_NAME, case)

    def patronymic_case(self, case: int | None = None) -> str | list[str]:
        return self.decline_field(NamePart.PATRONYMIC, case)

    def split_full_name(self, full_name: str) -> list[NameWord]:
        """Register the whitespace-separated tokens of ``full_name`` and classify them.

        Runs of whitespace separate tokens, so ``"  Иванов   Петр "`` gives two
        words and an empty string none.
        """
        if not isinstance(full_name, str):
            raise TypeError(f"full name must be a str, got {type(full_name).__name__}")
        for token in full_name.split():
            self._words.append(NameWord(token))
        self._invalidate()
        self._advance_to(Readiness.INDEXED)
        return list(self._words)

    def full_name_format(self, full_name: str) -> str:
        """Role letters of ``full_name``: ``"Иванов Петр"`` gives ``"S N"``."""
        self.full_reset()
        return self._formatter.role_format(self.split_full_name(full_name))

    def detect_gender(self, full_name: str | None = None) -> Gender:
        """Gender of the person named by ``full_name`` (or by the registered tokens)."""
        if full_name is not None:
            self.full_reset()
            self.split_full_name(full_name)
        self._advance_to(Readiness.GENDER_RESOLVED)
        if not self._words:
            return Gender.UNRESOLVED
        return self._words[0].gender

    def formatted(self, case: int | None = None, template: str | None = None) -> str | list[str]:
        """
        Fill ``template`` with the declined name.

        ``S``, ``N`` and ``F`` are replaced by surname, first name and
        patronymic; other characters are copied. With ``case`` None or 0 the
        template is filled for every case and a list is returned.
        """
        case = self._check_case(case)
        self._advance_to(Readiness.DECLINED)
        fields = {role: self._role_cases(role) for role in ROLES}
        if not case:
            return self._formatter.fill_template_all(template, fields)
        return self._formatter.fill_template(template, fields, case)

    def formatted_words(self, case: int | None = None, words=None) -> str | list[str]:
        """Declined ``words`` (default: all registered words) in their own order."""
        case = self._check_case(case)
        words = self._words if words is None else [ensure_word(word) for word in words]
        self._advance_to(Readiness.DECLINED)
        if not case:
            return self._formatter.words_all_cases(words)
        return self._formatter.words_in_case(words, case)

    # ------------------------------------------------------------------
    # One-shot forms
    # ------------------------------------------------------------------

    def _one_shot(self, setter, text: str, gender: Gender | None) -> None:
        self.full_reset()
        setter(text)
        if gender:
            self.set_gender(gender)

    def q_first_name(self, first_name: str, case: int | None = None, gender: Gender | None = None) -> str | list[str]:
        self._one_shot(self.set_first_name, first_name, gender)
        return self.first_name_case(case)

    def q_last_name(self, last_name: str, case: int | None = None, gender: Gender | None = None) -> str | list[str]:
        self._one_shot(self.set_last_name, last_name, gender)
        return self.last_name_case(case)

    def q_patronymic(self, patronymic: str, case: int | None = None, gender: Gender | None = None) -> str | list[str]:
        self._one_shot(self.set_patronymic, patronymic, gender)
        return self.patronymic_case(case)

    def q_full_name(
        self,
        last_name: str | None = "",
        first_name: str | None = "",
        patronymic: str | None = "",
        gender: Gender | None = None,
        case: int | None = None,
        template: str | None = None,
    ) -> str | list[str]:
        self.full_reset()
        self.set_full_name(last_name, first_name, patronymic)
        if gender:
            self.set_gender(gender)
        return self.formatted(case, template)

    def q(self, full_name: str, case: int | None = None, gender: Gender | None = None) -> str | list[str]:
        """Decline a free-text full name, keeping the order of its tokens."""
        self.full_reset()
        words = self.split_full_name(full_name)
        if gender:
            self.set_gender(gender)
        return self.formatted_words(case, words)

    # ------------------------------------------------------------------
    # Batch processing
    # ------------------------------------------------------------------

    def create_persistent_multiprocess_pool(
        self,
        *,
        max_workers: int | None = None,
        chunk_size: int = 64,
        mp_start_method: str = "spawn",
    ) -> PersistentMultiprocessDecliner:
        """Process pool whose workers each hold an engine with this pack and config.

        Raises ValueError when the pack cannot be pickled into the workers.
        """
        return PersistentMultiprocessDecliner(
            (self._pack,),
            config=self._config,
            max_workers=max_workers,
            chunk_size=chunk_size,
            mp_start_method=mp_start_method,
        )

    def decline_batch_multiprocess(
        self,
        names: list[str],
        case: int | None = None,
        gender: Gender | None = None,
        *,
        max_workers: int | None = None,
        chunk_size: int = 64,
        mp_start_method: str = "spawn",
    ) -> list[str | list[str]]:
        """Run `q` over ``names`` in a temporary process pool."""
        return decline_names_multiprocess(
            names,
            (self._pack,),
            case,
            gender,
            config=self._config,
            max_workers=max_workers,
            chunk_size=chunk_size,
            mp_start_method=mp_start_method,
        )
