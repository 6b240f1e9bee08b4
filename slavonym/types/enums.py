"""
Enumerations shared by the declension engine and the rule packs.
"""
from __future__ import annotations

from enum import Enum, IntEnum


class Gender(IntEnum):
    """Grammatical gender of a person (and of every token of their name)."""

    UNRESOLVED = 0
    MASCULINE = 1
    FEMININE = 2


class NamePart(Enum):
    """Role of a token inside a personal name.

    The values are the letters used by role-format strings and templates.
    """

    UNSET = ""
    FIRST_NAME = "N"
    LAST_NAME = "S"
    PATRONYMIC = "F"


ROLES = (NamePart.FIRST_NAME, NamePart.LAST_NAME, NamePart.PATRONYMIC)


class Readiness(IntEnum):
    """Preparation state of an engine; later states imply the earlier ones."""

    DIRTY = 0
    PARTS_CLASSIFIED = 1
    GENDER_RESOLVED = 2
    INDEXED = 3
    DECLINED = 4


class RussianCase(IntEnum):
    NOMINATIVE = 0
    GENITIVE = 1
    DATIVE = 2
    ACCUSATIVE = 3
    INSTRUMENTAL = 4
    PREPOSITIONAL = 5


class UkrainianCase(IntEnum):
    NOMINATIVE = 0
    GENITIVE = 1
    DATIVE = 2
    ACCUSATIVE = 3
    INSTRUMENTAL = 4
    LOCATIVE = 5
    VOCATIVE = 6
