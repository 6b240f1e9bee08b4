"""
Ukrainian rule pack: seven cases (including the vocative), first-, second- and
third-declension rules with consonant alternations.
"""
from __future__ import annotations

from decimal import Decimal as D

from slavonym.services.rules import EvaluationContext, RulePack, contains, tail
from slavonym.types import Gender, GenderScores, NamePart, NamePartScores, UkrainianCase

VOWELS = "аеиоуіїєюя"
CONSONANTS = "бвгджзйклмнпрстфхцчшщ"
SIBILANTS = "жчшщ"
NON_SIBILANTS = "бвгдзклмнпрстфхц"
ALWAYS_SOFT = "ьюяєї"
LABIALS = "мвпбф"
APOSTROPHE = "’"


def alternate_gkh(letter: str) -> str:
    """г, к, х become з, ц, с before -і (Ольга - Ользі)."""
    return {"г": "з", "к": "ц", "х": "с"}.get(letter, letter)


def alternate_vocative(letter: str) -> str:
    """к, г become ч, ж in the vocative."""
    return {"к": "ч", "г": "ж"}.get(letter, letter)


def is_apostrophe(char: str) -> bool:
    return not contains(char, " " + CONSONANTS + VOWELS)


def stem_of(word: str) -> str:
    """Strip trailing vowels and soft signs."""
    while word and word[-1] in VOWELS + "ь":
        word = word[:-1]
    return word


def second_declension_group(word: str) -> int:
    """Group of a second-declension noun: 1 hard, 2 mixed, 3 soft."""
    stem = stem_of(word)
    stripped = word[len(stem) :]
    ending = stripped[0] if stripped else ""
    stem_end = stem[-1:]
    if contains(stem_end, NON_SIBILANTS) and not contains(ending, ALWAYS_SOFT):
        return 1
    if contains(stem_end, SIBILANTS) and not contains(ending, ALWAYS_SOFT):
        return 2
    return 3


def last_vowel(word: str, letters: str) -> str | None:
    """Last letter of ``word`` (first letter excluded) found in ``letters``."""
    for char in reversed(word[1:]):
        if char in letters:
            return char
    return None


# ---------------------------------------------------------------------------
# Masculine declension
# ---------------------------------------------------------------------------


def man_rule_1(ctx: EvaluationContext) -> bool:
    """First-declension names on -а and -я (Микола, Ілля)."""
    before = ctx.last(2, 1)
    alt = alternate_gkh(before)
    if ctx.last(1) == "а":
        return ctx.inflect(
            (before + "и", alt + "і", before + "у", before + "ою", alt + "і", before + "о"), 2, rule=101,
        )
    if ctx.last(1) == "я":
        if before == "і":
            return ctx.inflect(("ї", "ї", "ю", "єю", "ї", "є"), 1, rule=102)
        return ctx.inflect(
            (before + "і", alt + "і", before + "ю", before + "ею", alt + "і", before + "е"), 2, rule=103,
        )
    return False


def man_rule_2(ctx: EvaluationContext) -> bool:
    """Names on -р: Віктор - Віктора, but Ігор - Ігоря."""
    if ctx.last(1) != "р":
        return False
    if ctx.is_named("Ігор", "Лазар"):
        return ctx.inflect(("я", "еві", "я", "ем", "еві", "е"), rule=201)
    stem = ctx.token
    if tail(stem, 2, 1) == "і":
        # Федір - Федора
        stem = stem[:-2] + "о" + stem[-1]
    return ctx.inflect(("а", "ові", "а", "ом", "ові", "е"), stem=stem, rule=202)


def man_rule_3(ctx: EvaluationContext) -> bool:
    """Second-declension nouns on a consonant, -о or -ь."""
    token = ctx.token
    before = ctx.last(2, 1)
    if not contains(ctx.last(1), CONSONANTS + "оь"):
        return False

    group = second_declension_group(token)
    stem = stem_of(token)
    stem_last = stem[-1:]
    vocative_last = alternate_vocative(stem_last)

    # Антін, Нестір, Федір: і only in the nominative
    if (
        stem_last != "й"
        and tail(stem, 2, 1) == "і"
        and tail(stem, 4) not in ("світ", "цвіт")
        and not ctx.is_named("Гліб")
        and ctx.last(2) not in ("ік", "іч")
    ):
        stem = stem[:-2] + "о" + stem[-1]

    # fleeting е: Орел - Орла, but not the -ев suffix (Огнев - Огнева)
    if (
        stem[:1] == "о"
        and last_vowel(stem, VOWELS + "гк") == "е"
        and tail(stem, 2, 1) == "е"
        and ctx.last(2) not in ("сь", "ев", "єв")
    ):
        cut = stem.rfind("е")
        stem = stem[:cut] + stem[cut + 1 :]

    if group == 1:
        if ctx.last(2) == "ок" and ctx.last(3) != "оок":
            return ctx.inflect(("ка", "кові", "ка", "ком", "кові", "че"), 2, rule=301)
        if ctx.last(2) in ("ов", "ев", "єв") and not ctx.is_named("Лев", "Остромов"):
            return ctx.inflect(
                (
                    stem_last + "а",
                    stem_last + "у",
                    stem_last + "а",
                    stem_last + "им",
                    stem_last + "у",
                    vocative_last + "е",
                ),
                1,
                stem=stem,
                rule=302,
            )
        if ctx.last(2) == "ін":
            return ctx.inflect(("а", "у", "а", "ом", "у", "е"), rule=303)
        return ctx.inflect(
            (
                stem_last + "а",
                stem_last + "ові",
                stem_last + "а",
                stem_last + "ом",
                stem_last + "ові",
                vocative_last + "е",
            ),
            1,
            stem=stem,
            rule=304,
        )

    if group == 2:
        return ctx.inflect(("а", "еві", "а", "ем", "еві", "е"), stem=stem, rule=305)

    if ctx.last(2) == "ей" and contains(ctx.last(3, 1), LABIALS):
        # Соловей - Солов'я
        return ctx.inflect(("я", "єві", "я", "єм", "єві", "ю"), stem=token[:-2] + APOSTROPHE, rule=306)
    if ctx.last(1) == "й" or before == "і":
        return ctx.inflect(("я", "єві", "я", "єм", "єві", "ю"), 1, rule=307)
    if token == "швець":
        return ctx.inflect(("евця", "евцеві", "евця", "евцем", "евцеві", "евцю"), 4, rule=308)
    if ctx.last(3) == "ець":
        return ctx.inflect(("ця", "цеві", "ця", "цем", "цеві", "цю"), 3, rule=309)
    if ctx.last(3) in ("єць", "яць"):
        return ctx.inflect(("йця", "йцеві", "йця", "йцем", "йцеві", "йцю"), 3, rule=310)
    return ctx.inflect(("я", "еві", "я", "ем", "еві", "ю"), stem=stem, rule=311)


def man_rule_4(ctx: EvaluationContext) -> bool:
    """Surnames on -і decline as plurals."""
    if ctx.last(1) == "і":
        return ctx.inflect(("их", "им", "их", "ими", "их", "і"), 1, rule=4)
    return False


def man_rule_5(ctx: EvaluationContext) -> bool:
    """Adjectival surnames on -ий, -ой."""
    if ctx.last(2) in ("ий", "ой"):
        return ctx.inflect(("ого", "ому", "ого", "им", "ому", "ий"), 2, rule=5)
    return False


def man_patronymic(ctx: EvaluationContext) -> bool:
    if ctx.last(2) in ("ич", "іч"):
        return ctx.inflect(("а", "у", "а", "ем", "у", "у"), rule=1)
    return False


# ---------------------------------------------------------------------------
# Feminine declension
# ---------------------------------------------------------------------------


def woman_rule_1(ctx: EvaluationContext) -> bool:
    """First-declension names on -а and -я (Ольга - Ользі)."""
    before = ctx.last(2, 1)
    alt = alternate_gkh(before)
    if ctx.last(4) == "ніга":
        # -ніга declines as -нога
        return ctx.inflect(("ги", "зі", "гу", "гою", "зі", "го"), stem=ctx.token[:-3] + "о", rule=101)
    if ctx.last(1) == "а":
        return ctx.inflect(
            (before + "и", alt + "і", before + "у", before + "ою", alt + "і", before + "о"), 2, rule=102,
        )
    if ctx.last(1) == "я":
        if contains(before, VOWELS) or is_apostrophe(before):
            return ctx.inflect(("ї", "ї", "ю", "єю", "ї", "є"), 1, rule=103)
        return ctx.inflect(
            (before + "і", alt + "і", before + "ю", before + "ею", alt + "і", before + "е"), 2, rule=104,
        )
    return False


def woman_rule_2(ctx: EvaluationContext) -> bool:
    """Third-declension names on a consonant (Любов - Любов'ю)."""
    if not contains(ctx.last(1), CONSONANTS + "ь"):
        return False
    stem = stem_of(ctx.token)
    stem_last = tail(stem, 1)
    stem_before_last = tail(stem, 2, 1)
    apostrophe = APOSTROPHE if contains(stem_last, LABIALS) and contains(stem_before_last, VOWELS) else ""
    doubled = stem_last if contains(stem_last, "дтзсцлн") else ""
    if ctx.last(1) == "ь":
        return ctx.inflect(("і", "і", "ь", doubled + apostrophe + "ю", "і", "е"), stem=stem, rule=201)
    return ctx.inflect(("і", "і", "", doubled + apostrophe + "ю", "і", "е"), stem=stem, rule=202)


def woman_rule_3(ctx: EvaluationContext) -> bool:
    """Adjectival surnames: -ська, -цька, Russian -ая."""
    before = ctx.last(2, 1)
    if ctx.last(2) == "ая":
        # Донская
        return ctx.inflect(("ої", "ій", "ую", "ою", "ій", "ая"), 2, rule=301)
    if ctx.last(1) == "а" and (contains(before, "чнв") or ctx.last(3, 2) == "ьк"):
        return ctx.inflect(
            (before + "ої", before + "ій", before + "у", before + "ою", before + "ій", before + "о"), 2, rule=302,
        )
    return False


def woman_patronymic(ctx: EvaluationContext) -> bool:
    if ctx.last(3) == "вна":
        return ctx.inflect(("и", "і", "у", "ою", "і", "о"), 1, rule=1)
    return False


# ---------------------------------------------------------------------------
# Gender signals
# ---------------------------------------------------------------------------


def gender_by_first_name(ctx: EvaluationContext) -> GenderScores:
    man = D(0)
    woman = D(0)
    if ctx.last(1) == "й":
        man += D("0.9")
    if ctx.is_named("Петро", "Микола"):
        man += 30
    if ctx.last(2) in ("он", "ов", "ав", "ам", "ол", "ан", "рд", "мп", "ко", "ло"):
        man += D("0.5")
    if ctx.last(3) in ("бов", "нка", "яра", "ила", "опа"):
        woman += D("0.5")
    if contains(ctx.last(1), CONSONANTS):
        man += D("0.01")
    if ctx.last(1) == "ь":
        man += D("0.02")
    if ctx.last(2) == "дь":
        woman += D("0.1")
    if ctx.last(3) in ("ель", "бов"):
        woman += D("0.4")
    return GenderScores(man, woman)


def gender_by_last_name(ctx: EvaluationContext) -> GenderScores:
    man = D(0)
    woman = D(0)
    if ctx.last(2) in ("ов", "ин", "ев", "єв", "ін", "їн", "ий", "їв", "ів", "ой", "ей"):
        man += D("0.4")
    if ctx.last(3) in ("ова", "ина", "ева", "єва", "іна", "мін"):
        woman += D("0.4")
    if ctx.last(2) == "ая":
        woman += D("0.4")
    return GenderScores(man, woman)


def gender_by_patronymic(ctx: EvaluationContext) -> GenderScores:
    if ctx.last(2) == "ич":
        return GenderScores(D(10), D(0))
    if ctx.last(2) == "на":
        return GenderScores(D(0), D(12))
    return GenderScores()


# ---------------------------------------------------------------------------
# Name-part signals
# ---------------------------------------------------------------------------

FIRST_NAME_EXCEPTIONS = (
    "Лев", "Гаїна", "Афіна", "Антоніна", "Ангеліна", "Альвіна", "Альбіна", "Аліна", "Павло",
    "Олесь", "Микола", "Мая", "Англеліна", "Елькін", "Мерлін",
)

SURNAME_ENDINGS_2 = frozenset((
    "ов", "ін", "ев", "єв", "ий", "ин", "ой", "ко", "ук", "як", "ца", "их", "ик", "ун", "ок",
    "ша", "ая", "га", "єк", "аш", "ив", "юк", "ус", "це", "ак", "бр", "яр", "іл", "ів", "ич",
    "сь", "ей", "нс", "яс", "ер", "ай", "ян", "ах", "ць", "ющ", "іс", "ач", "уб", "ох", "юх",
    "ут", "ча", "ул", "вк", "зь", "уц", "їн", "де", "уз", "юр", "ік", "іч", "ро",
))

SURNAME_ENDINGS_3 = frozenset((
    "ова", "ева", "єва", "тих", "рик", "вач", "аха", "шен", "мей", "арь", "вка", "шир", "бан",
    "чий", "іна", "їна", "ька", "ань", "ива", "аль", "ура", "ран", "ало", "ола", "кур", "оба",
    "оль", "нта", "зій", "ґан", "іло", "шта", "юпа", "рна", "бла", "еїн", "има", "мар", "кар",
    "оха", "чур", "ниш", "ета", "тна", "зур", "нір", "йма", "орж", "рба", "іла", "лас", "дід",
    "роз", "аба", "чан", "ган",
))

SURNAME_ENDINGS_4 = frozenset((
    "ьник", "нчук", "тник", "кирь", "ский", "шена", "шина", "вина", "нина", "гана", "хній",
    "зюба", "орош", "орон", "сило", "руба", "лест", "мара", "обка", "рока", "сика", "одна",
    "нчар", "вата", "ндар", "грій",
))


def classify_name_part(ctx: EvaluationContext) -> NamePartScores:
    first = D(0)
    second = D(0)
    father = D(0)

    if ctx.last(3) in ("вна", "чна", "ліч") or ctx.last(4) in ("ьмич", "ович"):
        father += 3

    if ctx.last(3) == "тин" or ctx.last(4) in ("ьмич", "юбов", "івна", "явка", "орив", "кіян"):
        first += D("0.5")

    if ctx.is_named(*FIRST_NAME_EXCEPTIONS):
        first += 10

    if ctx.last(2) in SURNAME_ENDINGS_2:
        second += D("0.4")
    if ctx.last(3) in SURNAME_ENDINGS_3:
        second += D("0.4")
    if ctx.last(4) in SURNAME_ENDINGS_4:
        second += D("0.4")

    if ctx.last(1) == "і":
        second += D("0.2")

    return NamePartScores(first_name=first, last_name=second, patronymic=father)


UKRAINIAN = RulePack(
    language="uk",
    build="11071222",
    case_count=len(UkrainianCase),
    case_names=tuple(case.name.lower() for case in UkrainianCase),
    vowels=VOWELS,
    consonants=CONSONANTS,
    chains={
        (Gender.MASCULINE, NamePart.FIRST_NAME): ("man_1", "man_2", "man_3"),
        (Gender.FEMININE, NamePart.FIRST_NAME): ("woman_1", "woman_2"),
        (Gender.MASCULINE, NamePart.LAST_NAME): ("man_5", "man_1", "man_2", "man_3", "man_4"),
        (Gender.FEMININE, NamePart.LAST_NAME): ("woman_3", "woman_1"),
        (Gender.MASCULINE, NamePart.PATRONYMIC): ("man_patronymic",),
        (Gender.FEMININE, NamePart.PATRONYMIC): ("woman_patronymic",),
    },
    rules={
        "man_1": man_rule_1,
        "man_2": man_rule_2,
        "man_3": man_rule_3,
        "man_4": man_rule_4,
        "man_5": man_rule_5,
        "man_patronymic": man_patronymic,
        "woman_1": woman_rule_1,
        "woman_2": woman_rule_2,
        "woman_3": woman_rule_3,
        "woman_patronymic": woman_patronymic,
    },
    gender_scorers={
        NamePart.FIRST_NAME: gender_by_first_name,
        NamePart.LAST_NAME: gender_by_last_name,
        NamePart.PATRONYMIC: gender_by_patronymic,
    },
    classifier=classify_name_part,
    aliases=("ua",),
)
