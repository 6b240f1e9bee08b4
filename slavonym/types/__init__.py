"""
Types package for name declension.

This package contains enums, score and result types, configuration, errors and
the word entity used throughout the declension engine.
"""

from slavonym.types.config import DeclensionConfig
from slavonym.types.enums import ROLES, Gender, NamePart, Readiness, RussianCase, UkrainianCase
from slavonym.types.errors import RulePackError, UnsupportedLanguageError
from slavonym.types.results import NO_RULE, RuleOutcome
from slavonym.types.scores import ZERO, GenderScores, NamePartScores, Score
from slavonym.types.word import NameWord, ensure_word

__all__ = [
    "NO_RULE",
    "ROLES",
    "ZERO",
    "DeclensionConfig",
    "Gender",
    "GenderScores",
    "NamePart",
    "NamePartScores",
    "NameWord",
    "Readiness",
    "RuleOutcome",
    "RulePackError",
    "RussianCase",
    "Score",
    "UkrainianCase",
    "UnsupportedLanguageError",
    "ensure_word",
]
