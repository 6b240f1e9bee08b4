"""
Result types produced by rule-chain evaluation.
"""
from __future__ import annotations

from dataclasses import dataclass

# Diagnostic rule id of a token that no rule matched.
NO_RULE = -1


@dataclass(frozen=True)
class RuleOutcome:
    """Case forms produced for one token (or one hyphen part) by a rule chain."""

    forms: tuple[str, ...]
    rule_id: int
    matched: bool

    @classmethod
    def declined(cls, forms, rule_id: int) -> RuleOutcome:
        return cls(forms=tuple(forms), rule_id=rule_id, matched=True)

    @classmethod
    def unchanged(cls, token: str, case_count: int) -> RuleOutcome:
        """Outcome of an unmatched chain: every case equals the token."""
        return cls(forms=(token,) * case_count, rule_id=NO_RULE, matched=False)
