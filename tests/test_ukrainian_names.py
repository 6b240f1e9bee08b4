"""
Ukrainian Names Test Suite

Case indexes follow `UkrainianCase`: 0 nominative, 1 genitive, 2 dative,
3 accusative, 4 instrumental, 5 locative, 6 vocative.
"""

from slavonym.types import Gender

M = Gender.MASCULINE
F = Gender.FEMININE

FULL_NAME_TEST_CASES = [
    ("Облогін Денис", 1, "Облогіна Дениса"),
    ("Шевченко Тарас", 1, "Шевченка Тараса"),
    ("Шевченко Тарас", 2, "Шевченкові Тарасові"),
    ("Шевченко Тарас", 6, "Шевченче Тарасе"),
]

FIRST_NAME_TEST_CASES = [
    ("Ольга", F, 2, "Ользі"),
    ("Ольга", F, 6, "Ольго"),
    ("Микола", M, 1, "Миколи"),
    ("Микола", M, 2, "Миколі"),
    ("Федір", M, 1, "Федора"),
    ("Федір", M, 2, "Федорові"),
    ("Ігор", M, 1, "Ігоря"),
    ("Ігор", M, 2, "Ігореві"),
    ("Андрій", M, 1, "Андрія"),
    ("Андрій", M, 2, "Андрієві"),
    ("Олег", M, 1, "Олега"),
    ("Олег", M, 6, "Олеже"),
    ("Любов", F, 1, "Любові"),
    ("Любов", F, 4, "Любов’ю"),
]

LAST_NAME_TEST_CASES = [
    ("Орел", M, 1, "Орла"),
    ("Орел", M, 2, "Орлові"),
    # -ев keeps its е
    ("Огнев", M, 1, "Огнева"),
    ("Осетрев", M, 1, "Осетрева"),
    ("Отрепев", M, 4, "Отрепевим"),
    ("Соловей", M, 1, "Солов’я"),
    ("Кравець", M, 1, "Кравця"),
    ("Петров", M, 1, "Петрова"),
    ("Петров", M, 2, "Петрову"),
    ("Петров", M, 4, "Петровим"),
    ("Петров", M, 6, "Петрове"),
    ("Косач", M, 1, "Косача"),
    ("Косач", M, 2, "Косачеві"),
    ("Шевченко", F, 1, "Шевченко"),
    ("Українка", F, 1, "Українки"),
    ("Українка", F, 2, "Українці"),
    ("Ковальська", F, 1, "Ковальської"),
    ("Ковальська", F, 2, "Ковальській"),
    ("Косач", F, 2, "Косач"),
]

PATRONYMIC_TEST_CASES = [
    ("Петрович", M, 1, "Петровича"),
    ("Петрович", M, 2, "Петровичу"),
    ("Петрович", M, 6, "Петровичу"),
    ("Петрівна", F, 1, "Петрівни"),
    ("Петрівна", F, 2, "Петрівні"),
    ("Петрівна", F, 6, "Петрівно"),
]


def run_single_field_cases(decline, test_cases, label):
    failed = 0
    for token, gender, case, expected in test_cases:
        result = decline(token, case, gender)
        if result != expected:
            failed += 1
            print(f"FAILED: '{token}' ({gender.name}, case {case}): expected '{expected}', got '{result}'")
    assert failed == 0, f"{label}: {failed} failures out of {len(test_cases)} tests"


def test_ukrainian_full_names(ukrainian):
    failed = 0
    for full_name, case, expected in FULL_NAME_TEST_CASES:
        result = ukrainian.q(full_name, case)
        if result != expected:
            failed += 1
            print(f"FAILED: '{full_name}' (case {case}): expected '{expected}', got '{result}'")
    assert failed == 0, f"Ukrainian full names: {failed} failures out of {len(FULL_NAME_TEST_CASES)} tests"


def test_ukrainian_first_names(ukrainian):
    run_single_field_cases(ukrainian.q_first_name, FIRST_NAME_TEST_CASES, "Ukrainian first names")


def test_ukrainian_last_names(ukrainian):
    run_single_field_cases(ukrainian.q_last_name, LAST_NAME_TEST_CASES, "Ukrainian last names")


def test_ukrainian_patronymics(ukrainian):
    run_single_field_cases(ukrainian.q_patronymic, PATRONYMIC_TEST_CASES, "Ukrainian patronymics")


def test_vocative_is_the_seventh_case(ukrainian):
    forms = ukrainian.q("Шевченко Тарас")
    assert len(forms) == 7
    assert forms[-1] == "Шевченче Тарасе"


def test_masculine_gender_detected(ukrainian):
    assert ukrainian.detect_gender("Шевченко Тарас Григорович") is Gender.MASCULINE
    assert ukrainian.full_name_format("Шевченко Тарас Григорович") == "S N F"


if __name__ == "__main__":
    from slavonym import NameCaseEngine

    engine = NameCaseEngine("uk")
    test_ukrainian_full_names(engine)
    test_ukrainian_first_names(engine)
    test_ukrainian_last_names(engine)
    test_ukrainian_patronymics(engine)
