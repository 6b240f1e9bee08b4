"""
Configuration for the declension engine.
"""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DeclensionConfig:
    """Immutable engine configuration.

    Plain values only, so a config can be pickled and sent to worker processes.
    """

    language: str = "ru"
    # Lower-cased leading parts of compound surnames that never decline ("Тулуз-Лотрек").
    hyphen_exclusions: frozenset[str] = field(default_factory=lambda: frozenset({"тулуз"}))
    # Rule pack whose classifier decides whether a leading hyphen part is a surname.
    hyphen_classifier_language: str = "ru"
    default_template: str = "S N F"

    @classmethod
    def create_default(cls) -> DeclensionConfig:
        return cls()
