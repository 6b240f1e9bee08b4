"""
Tests for persistent multi-process declension.
"""

from dataclasses import replace

import pytest

from slavonym import DeclensionConfig, Gender, NameCaseEngine
from slavonym.languages import RUSSIAN, UKRAINIAN, get_rule_pack
from slavonym.services import PersistentMultiprocessDecliner, RulePack
from slavonym.types import ROLES, NamePartScores, UnsupportedLanguageError

TEST_NAMES = [
    "Облогин Денис",
    "Иванов Петр Сергеевич",
    "ИВАНОВ ПЕТР",
    "Иванова Мария Петровна",
    "Толстой Лев Николаевич",
    "Петров-Водкин Кузьма",
    "Шевченко",
    "123",
    "Пушкин Александр Сергеевич",
    "Толстая",
]


def test_batch_multiprocess_matches_single_process(russian):
    """Multi-process convenience path should match single-process output exactly."""
    expected = [russian.q(name, 1) for name in TEST_NAMES]
    actual = russian.decline_batch_multiprocess(TEST_NAMES, 1, max_workers=2, chunk_size=4)
    assert actual == expected


def test_batch_multiprocess_full_paradigm_and_gender(ukrainian):
    names = ["Шевченко Тарас", "Косач Леся"]
    expected = [ukrainian.q(name, None, Gender.FEMININE) for name in names]
    actual = ukrainian.decline_batch_multiprocess(names, gender=Gender.FEMININE, max_workers=1)
    assert actual == expected
    assert all(len(forms) == 7 for forms in actual)


def test_persistent_multiprocess_pool_can_be_reused(russian):
    """Persistent pool should support repeated batch calls without changing outputs."""
    names_a = TEST_NAMES[:5]
    names_b = TEST_NAMES[5:]

    expected_a = [russian.q(name, 4) for name in names_a]
    expected_b = [russian.q(name, 4) for name in names_b]

    with russian.create_persistent_multiprocess_pool(max_workers=2, chunk_size=3) as pool:
        actual_a = pool.decline_names(names_a, 4)
        actual_b = pool.decline_names(names_b, 4)
        assert pool.decline_names([]) == []

    assert actual_a == expected_a
    assert actual_b == expected_b


def test_pool_workers_use_engine_config():
    config = DeclensionConfig(hyphen_exclusions=frozenset())
    engine = NameCaseEngine("ru", config)
    with engine.create_persistent_multiprocess_pool(max_workers=1) as pool:
        assert pool.decline_names(["Тулуз-Лотрек"], 1) == ["Тулуза-Лотрека"]


def test_persistent_multiprocess_pool_rejects_calls_after_close(russian):
    """Closed pool should raise a clear error on subsequent use."""
    pool = russian.create_persistent_multiprocess_pool(max_workers=2, chunk_size=2)
    pool.close()
    assert pool.closed

    with pytest.raises(RuntimeError, match="closed"):
        pool.decline_names(["Облогин Денис"])


def add_s(ctx):
    return ctx.inflect(("s", "ss"), rule=1)


def no_signal(ctx):
    return NamePartScores()


# unregistered pack built from module-level functions, so workers can unpickle it
CUSTOM_PACK = RulePack(
    language="xx",
    build="1",
    case_count=3,
    case_names=("base", "one", "two"),
    vowels="aeiou",
    consonants="bcdfghjklmnpqrstvwxz",
    chains={(gender, role): ("add_s",) for gender in (Gender.MASCULINE, Gender.FEMININE) for role in ROLES},
    rules={"add_s": add_s},
    gender_scorers={},
    classifier=no_signal,
)


def test_unregistered_pack_is_sent_to_workers():
    engine = NameCaseEngine(CUSTOM_PACK)
    with pytest.raises(UnsupportedLanguageError):
        get_rule_pack("xx")
    assert engine.decline_batch_multiprocess(["Abc Def"], 1, max_workers=1) == [engine.q("Abc Def", 1)]
    assert engine.q("Abc Def", 1) == "Abcs Defs"


def test_pack_that_cannot_be_pickled_fails_before_workers_start():
    pack = replace(CUSTOM_PACK, language="yy", rules={"add_s": lambda ctx: ctx.keep(rule=1)})
    engine = NameCaseEngine(pack)
    with pytest.raises(ValueError, match="'yy' cannot be sent"):
        engine.create_persistent_multiprocess_pool(max_workers=1)


def test_one_pool_serves_several_languages():
    with PersistentMultiprocessDecliner((RUSSIAN, UKRAINIAN), max_workers=1) as pool:
        assert pool.languages == ("ru", "uk")
        assert pool.decline_names(["Облогин Денис"], 1) == ["Облогина Дениса"]
        assert pool.decline_names(["Шевченко Тарас"], 2, language="uk") == ["Шевченкові Тарасові"]
        with pytest.raises(ValueError, match="no rule pack for 'pl'"):
            pool.decline_names(["Облогин Денис"], language="pl")


def test_pool_rejects_bad_arguments():
    with pytest.raises(ValueError, match="rule pack"):
        PersistentMultiprocessDecliner(())
    with pytest.raises(ValueError):
        PersistentMultiprocessDecliner((RUSSIAN,), max_workers=0)
    with pytest.raises(ValueError):
        PersistentMultiprocessDecliner((RUSSIAN,), chunk_size=0)
    with pytest.raises(ValueError, match="start method"):
        PersistentMultiprocessDecliner((RUSSIAN,), mp_start_method="no-such-method")
