"""
Engine State Test Suite

Lazy preparation of registered tokens and the argument checks of the
public query methods.
"""

import logging
from dataclasses import replace

import pytest

import slavonym
from slavonym import DeclensionConfig, NameCaseEngine, languages
from slavonym.languages import RUSSIAN, get_rule_pack, register_rule_pack, supported_languages
from slavonym.types import Gender, NamePart, Readiness, RulePackError, UnsupportedLanguageError


def test_readiness_advances_lazily(russian):
    assert russian.readiness is Readiness.DIRTY

    russian.set_first_name("Денис")
    assert russian.readiness is Readiness.DIRTY

    russian.prepare()
    assert russian.readiness is Readiness.INDEXED
    assert russian.words[0].forms == ()

    assert russian.first_name_case(1) == "Дениса"
    assert russian.readiness is Readiness.DECLINED

    russian.set_last_name("Облогин")
    assert russian.readiness is Readiness.DIRTY
    assert russian.words[0].forms == ()


def test_gender_confidence_resolves_gender_only(russian):
    russian.set_full_name("Иванова", "Мария", "Петровна")
    assert russian.gender_confidence == 12
    assert russian.readiness is Readiness.GENDER_RESOLVED


def test_empty_and_missing_fields_are_ignored(russian):
    russian.set_first_name("Денис").decline_all()
    russian.set_last_name("").set_patronymic(None)
    assert len(russian.words) == 1
    assert russian.readiness is Readiness.DECLINED


def test_non_string_field_is_rejected(russian):
    with pytest.raises(TypeError, match="first_name"):
        russian.set_first_name(42)
    with pytest.raises(TypeError):
        russian.q(None)


def test_case_index_is_checked(russian, ukrainian):
    with pytest.raises(ValueError, match="out of range"):
        russian.q_first_name("Денис", 6)
    with pytest.raises(ValueError):
        russian.q_first_name("Денис", -1)
    with pytest.raises(TypeError):
        russian.q_first_name("Денис", True)
    with pytest.raises(TypeError):
        russian.q_first_name("Денис", "1")
    # the vocative exists in Ukrainian only
    assert ukrainian.q_first_name("Денис", 6) == "Денисе"


def test_role_without_words_declines_to_empty(russian):
    russian.set_first_name("Денис")
    assert russian.last_name_case() == [""] * 6
    assert russian.last_name_case(1) == ""
    assert russian.patronymic_case(3) == ""


def test_unset_role_cannot_be_declined(russian):
    with pytest.raises(ValueError):
        russian.decline_field(NamePart.UNSET)


def test_nominative_form_is_the_original_token(russian):
    russian.set_full_name("ИВАНОВ", "пЕТР", "Сергеевич").decline_all()
    for word in russian.words:
        assert word.forms[0] == word.original
        assert len(word.forms) == russian.case_count


def test_decline_all_is_idempotent(russian):
    russian.set_full_name("Иванов", "Петр", "Сергеевич")
    first = [word.forms for word in russian.decline_all().words]
    second = [word.forms for word in russian.decline_all().words]
    assert first == second


def test_formatted_fills_templates(russian):
    russian.set_full_name("Иванов", "Петр", "Сергеевич")
    assert russian.formatted(1) == "Иванова Петра Сергеевича"
    assert russian.formatted(1, "N F") == "Петра Сергеевича"
    assert russian.formatted(2, "S, N") == "Иванову, Петру"

    every_case = russian.formatted()
    assert len(every_case) == 6
    assert every_case[0] == "Иванов Петр Сергеевич"
    # case 0 asks for the whole paradigm as well
    assert russian.formatted(0) == every_case


def test_formatted_with_configured_template():
    engine = NameCaseEngine("ru", DeclensionConfig(default_template="N S"))
    assert engine.q_full_name("Иванов", "Петр", case=1) == "Петра Иванова"


def test_one_shot_forms_reset_previous_state(russian):
    russian.set_full_name("Иванов", "Петр", "Сергеевич")
    assert russian.q_first_name("Денис", 1) == "Дениса"
    assert len(russian.words) == 1
    assert russian.q("Облогин Денис", 1) == "Облогина Дениса"
    assert len(russian.words) == 2


def test_full_reset(russian):
    russian.set_full_name("Иванов", "Петр", "Сергеевич").decline_all()
    russian.full_reset()
    assert russian.words == ()
    assert russian.readiness is Readiness.DIRTY
    assert russian.formatted(1) == "  "


def test_forced_gender_applies_to_every_word(russian):
    russian.set_last_name("Иванов").set_gender(Gender.FEMININE).set_first_name("Денис")
    russian.decline_all()
    assert all(word.gender is Gender.FEMININE for word in russian.words)
    assert russian.last_name_case(1) == "Иванов"
    assert russian.first_name_case(1) == "Денис"

    russian.set_gender(Gender.UNRESOLVED)
    assert russian.detect_gender() is Gender.MASCULINE
    assert russian.last_name_case(1) == "Иванова"


def test_detect_gender_and_format(russian):
    assert russian.detect_gender("Иванова Мария Петровна") is Gender.FEMININE
    assert russian.detect_gender("") is Gender.UNRESOLVED
    assert russian.full_name_format("Иванов Петр Сергеевич") == "S N F"
    assert russian.full_name_format("Петр Иванов") == "N S"


def test_split_full_name_appends(russian):
    russian.set_first_name("Денис")
    words = russian.split_full_name("Облогин")
    assert [word.original for word in words] == ["Денис", "Облогин"]
    assert russian.readiness is Readiness.INDEXED


def test_versions(russian, ukrainian):
    assert russian.version == slavonym.__version__
    assert russian.language_version == "11072716"
    assert ukrainian.language_version == "11071222"
    assert russian.case_count == 6
    assert ukrainian.case_count == 7


def test_language_lookup():
    assert NameCaseEngine().language == "ru"
    assert NameCaseEngine("UA").language == "uk"
    assert NameCaseEngine(config=DeclensionConfig(language="uk")).language == "uk"
    assert get_rule_pack("ua") is get_rule_pack("uk")
    assert {"ru", "uk", "ua"} <= set(supported_languages())

    with pytest.raises(UnsupportedLanguageError, match="pl"):
        NameCaseEngine("pl")
    # unsupported languages are value errors for callers that do not import slavonym.types
    with pytest.raises(ValueError):
        NameCaseEngine("pl")


def test_broken_pack_is_rejected_on_registration(caplog):
    chains = dict(RUSSIAN.chains)
    chains[(Gender.MASCULINE, NamePart.FIRST_NAME)] = ("man_1", "man_99")
    broken = replace(RUSSIAN, language="broken", aliases=(), chains=chains)

    with caplog.at_level(logging.WARNING):
        with pytest.raises(RulePackError, match="man_99"):
            register_rule_pack(broken)
    assert "broken" in caplog.text
    assert "broken" not in supported_languages()


def test_split_full_name_tokenizes_on_whitespace_runs(russian):
    words = russian.split_full_name("  Иванов \t Петр\n")
    assert [word.original for word in words] == ["Иванов", "Петр"]
    assert russian.full_reset().split_full_name("   ") == []
    with pytest.raises(TypeError, match="full name"):
        russian.split_full_name(["Иванов"])


def test_supported_languages_follow_registration(monkeypatch):
    monkeypatch.setattr(languages, "_PACKS", dict(languages._PACKS))
    assert "ru-old" not in supported_languages()

    register_rule_pack(replace(RUSSIAN, language="ru-old", build="0", aliases=("ru-legacy",)))
    assert {"ru-old", "ru-legacy"} <= set(supported_languages())
    assert NameCaseEngine("ru-legacy").language_version == "0"
    assert not hasattr(languages, "SUPPORTED_LANGUAGES")
