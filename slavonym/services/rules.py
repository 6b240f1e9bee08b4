"""
Rule-chain evaluation for name declension.

A language is described by a `RulePack`: alphabets, case count, and for every
(gender, role) pair an ordered chain of rule identifiers. Each identifier
names a plain function taking an `EvaluationContext`. A rule inspects the
working token through the context and either returns False (no match, try
the next rule) or records case forms on the context and returns True. The
first matching rule wins; later rules in the chain never run.

Rule functions record their result with one of three context calls:

- ``ctx.keep(rule=...)``: the token does not decline, every case equals it.
- ``ctx.inflect(endings, drop, rule=...)``: drop ``drop`` trailing letters and
  append one ending per oblique case.
- ``ctx.literal(forms, rule=...)``: the full paradigm is spelled out.

All three return True so rules can ``return ctx.inflect(...)`` directly.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from slavonym.types import (
    NO_RULE,
    Gender,
    GenderScores,
    NamePart,
    NamePartScores,
    RuleOutcome,
    RulePackError,
)


def tail(text: str, length: int = 1, stop_after: int = 0) -> str:
    """Take ``length`` letters from the end of ``text``.

    With ``stop_after`` only the first ``stop_after`` of those letters are
    returned, so ``tail("петров", 2, 1) == "о"``.
    """
    start = max(len(text) - length, 0)
    cut = stop_after or length
    return text[start : start + cut]


def contains(needle: str, haystack) -> bool:
    """Letter-in-string or item-in-collection test; an empty needle never matches."""
    if isinstance(haystack, str):
        return bool(needle) and needle in haystack
    return needle in haystack


class EvaluationContext:
    """Working token plus memoized suffix lookups and the outcome slot."""

    __slots__ = ("token", "case_count", "forms", "rule_id", "_suffixes")

    def __init__(self, token: str, case_count: int):
        self.token = token
        self.case_count = case_count
        self.forms: tuple[str, ...] | None = None
        self.rule_id = NO_RULE
        self._suffixes: dict[tuple[int, int], str] = {}

    def last(self, length: int = 1, stop_after: int = 0) -> str:
        key = (length, stop_after)
        value = self._suffixes.get(key)
        if value is None:
            value = tail(self.token, length, stop_after)
            self._suffixes[key] = value
        return value

    def is_named(self, *names: str) -> bool:
        return any(self.token == name.lower() for name in names)

    def inflect(self, endings, drop: int = 0, *, rule: int, stem: str | None = None) -> bool:
        if len(endings) != self.case_count - 1:
            raise RulePackError(
                f"rule {rule} gives {len(endings)} endings for {self.case_count} cases",
            )
        base = self.token if stem is None else stem
        if drop:
            base = base[: len(base) - drop]
        self.forms = (self.token, *(base + ending for ending in endings))
        self.rule_id = rule
        return True

    def keep(self, *, rule: int) -> bool:
        self.forms = (self.token,) * self.case_count
        self.rule_id = rule
        return True

    def literal(self, forms, *, rule: int) -> bool:
        self.forms = tuple(form.lower() for form in forms)
        self.rule_id = rule
        return True


Rule = Callable[[EvaluationContext], bool]
GenderScorer = Callable[[EvaluationContext], GenderScores]
NamePartClassifier = Callable[[EvaluationContext], NamePartScores]


@dataclass(frozen=True)
class RulePack:
    """Everything the engine needs to know about one language."""

    language: str
    build: str
    case_count: int
    case_names: tuple[str, ...]
    vowels: str
    consonants: str
    chains: Mapping[tuple[Gender, NamePart], tuple[str, ...]]
    rules: Mapping[str, Rule]
    gender_scorers: Mapping[NamePart, GenderScorer]
    classifier: NamePartClassifier
    aliases: tuple[str, ...] = field(default=())

    def context(self, token: str) -> EvaluationContext:
        return EvaluationContext(token, self.case_count)

    def chain(self, gender: Gender, role: NamePart) -> tuple[str, ...]:
        try:
            return self.chains[(gender, role)]
        except KeyError:
            raise RulePackError(
                f"rule pack '{self.language}' has no chain for {gender.name} {role.name}",
            ) from None

    def validate(self) -> None:
        """Check that every chained identifier resolves to a rule function."""
        if len(self.case_names) != self.case_count:
            raise RulePackError(f"rule pack '{self.language}' names {len(self.case_names)} of {self.case_count} cases")
        for (gender, role), chain in self.chains.items():
            missing = [rule_id for rule_id in chain if rule_id not in self.rules]
            if missing:
                raise RulePackError(
                    f"rule pack '{self.language}' chain {gender.name} {role.name} names unknown rules {missing}",
                )

    def score_gender(self, token: str, role: NamePart) -> GenderScores:
        scorer = self.gender_scorers.get(role)
        if scorer is None:
            return GenderScores()
        return scorer(self.context(token))

    def classify(self, token: str) -> NamePartScores:
        return self.classifier(self.context(token))


class RuleChainEvaluator:
    """Runs the chain of a rule pack against a token."""

    def __init__(self, pack: RulePack):
        self._pack = pack

    @property
    def pack(self) -> RulePack:
        return self._pack

    def evaluate(self, token: str, gender: Gender, role: NamePart) -> RuleOutcome:
        """Decline a lower-cased token; an unmatched chain yields ``RuleOutcome.unchanged``."""
        chain = self._pack.chain(gender, role)
        rules = []
        for rule_id in chain:
            rule = self._pack.rules.get(rule_id)
            if rule is None:
                raise RulePackError(f"rule '{rule_id}' is not defined by rule pack '{self._pack.language}'")
            rules.append(rule)

        ctx = self._pack.context(token)
        for rule_id, rule in zip(chain, rules):
            if not rule(ctx):
                continue
            if ctx.forms is None:
                raise RulePackError(f"rule '{rule_id}' matched '{token}' without producing case forms")
            if len(ctx.forms) != self._pack.case_count:
                raise RulePackError(
                    f"rule '{rule_id}' produced {len(ctx.forms)} forms, expected {self._pack.case_count}",
                )
            logging.debug(f"'{token}' declined by {rule_id} (rule {ctx.rule_id})")
            return RuleOutcome.declined(ctx.forms, ctx.rule_id)

        logging.debug(f"no rule matched '{token}' for {gender.name} {role.name}")
        return RuleOutcome.unchanged(token, self._pack.case_count)
