"""
Compound Surname Test Suite

Hyphenated surnames decline part by part; a leading part only changes when
it looks like a surname on its own and is not excluded in the config.
"""

from slavonym import DeclensionConfig, NameCaseEngine
from slavonym.languages import RUSSIAN, UKRAINIAN
from slavonym.types import NO_RULE, Gender, NamePart, NameWord

HYPHENATED_TEST_CASES = [
    # (surname, case, expected)
    ("Петров-Водкин", 1, "Петрова-Водкина"),
    ("Петров-Водкин", 4, "Петровым-Водкиным"),
    ("Тулуз-Лотрек", 1, "Тулуз-Лотрека"),
    ("Жан-Петров", 1, "Жан-Петрова"),
    ("Петров-123", 1, "Петрова-123"),
    ("ПЕТРОВ-ВОДКИН", 2, "ПЕТРОВУ-ВОДКИНУ"),
]


def test_hyphenated_surnames(russian):
    passed = 0
    failed = 0

    for surname, case, expected in HYPHENATED_TEST_CASES:
        result = russian.q_last_name(surname, case, Gender.MASCULINE)
        if result == expected:
            passed += 1
        else:
            failed += 1
            print(f"FAILED: '{surname}' (case {case}): expected '{expected}', got '{result}'")

    print(f"Hyphenated surnames: {passed} passed, {failed} failed")
    assert failed == 0, f"Hyphenated surnames: {failed} failures out of {len(HYPHENATED_TEST_CASES)} tests"


def test_rule_id_comes_from_last_part(russian):
    russian.set_last_name("Петров-Водкин").decline_all()
    assert russian.words[0].rule_id == 603
    assert russian.words[0].forms[0] == "Петров-Водкин"

    russian.full_reset().set_last_name("Петров-123").decline_all()
    assert russian.words[0].rule_id == NO_RULE


def test_exclusions_are_configurable():
    engine = NameCaseEngine("ru", DeclensionConfig(hyphen_exclusions=frozenset()))
    assert engine.q_last_name("Тулуз-Лотрек", 1) == "Тулуза-Лотрека"


UKRAINIAN_HYPHENATED_TEST_CASES = [
    ("Нечуй-Левицький", 1, "Нечуя-Левицького"),
    ("Петров-Водкін", 1, "Петрова-Водкіна"),
    ("Жан-Петров", 1, "Жан-Петрова"),
]


def test_ukrainian_hyphenated_surnames(ukrainian):
    failed = 0
    for surname, case, expected in UKRAINIAN_HYPHENATED_TEST_CASES:
        result = ukrainian.q_last_name(surname, case, Gender.MASCULINE)
        if result != expected:
            failed += 1
            print(f"FAILED: '{surname}' (case {case}): expected '{expected}', got '{result}'")
    assert failed == 0, f"Ukrainian hyphenated surnames: {failed} failures out of {len(UKRAINIAN_HYPHENATED_TEST_CASES)} tests"


def test_leading_parts_use_russian_signals_by_default():
    # the Ukrainian signals alone take "Нечуй" for a first name
    assert UKRAINIAN.classify("нечуй").resolve() is NamePart.FIRST_NAME
    assert RUSSIAN.classify("нечуй").resolve() is NamePart.LAST_NAME

    engine = NameCaseEngine("uk", DeclensionConfig(hyphen_classifier_language="uk"))
    assert engine.q_last_name("Нечуй-Левицький", 1, Gender.MASCULINE) == "Нечуй-Левицького"


def test_only_surnames_are_split(russian):
    splitter = russian._splitter
    assert splitter.split(NameWord("Анна-Мария", NamePart.FIRST_NAME)) == ["Анна-Мария"]
    assert splitter.split(NameWord("Петров-Водкин", NamePart.LAST_NAME)) == ["Петров", "Водкин"]


def test_empty_parts_are_kept(russian):
    assert russian.q_last_name("Петров-", 1, Gender.MASCULINE) == "Петрова-"
