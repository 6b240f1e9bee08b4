"""
Russian rule pack: six cases, declension chains, gender and name-part signals.

Endings are listed for the oblique cases in `RussianCase` order (genitive,
dative, accusative, instrumental, prepositional); the nominative is always
the token itself.
"""
from __future__ import annotations

from decimal import Decimal as D

from slavonym.services.rules import EvaluationContext, RulePack, contains
from slavonym.types import Gender, GenderScores, NamePart, NamePartScores, RussianCase

VOWELS = "аеёиоуыэюя"
CONSONANTS = "бвгджзйклмнпрстфхцчшщ"

# Surname endings that never decline.
INDECLINABLE_3 = ("ово", "аго", "яго", "ирь")
INDECLINABLE_2 = ("их", "ых", "ко", "уа")

# Surname-like endings: a letter followed by anything but the listed letters.
SURNAME_PAIR_EXCLUDES = {
    "а": "взйкмнпрстфя",
    "б": "а",
    "в": "аь",
    "г": "а",
    "д": "ар",
    "е": "бвгдйлмня",
    "ё": "бвгдйлмня",
    "з": "а",
    "и": "гдйклмнопрсфя",
    "й": "ля",
    "к": "аст",
    "л": "аилоья",
    "м": "аип",
    "н": "ат",
    "о": "вдлнпря",
    "п": "п",
    "р": "адикпть",
    "с": "атуя",
    "т": "аор",
    "у": "дмр",
    "ф": "аь",
    "х": "а",
    "ц": "а",
    "ш": "а",
    "ы": "дн",
    "ь": "я",
    "я": "нс",
}

# Foreign masculine first names that the suffix signals get wrong.
MASCULINE_NAMES = (
    "Вова", "Анри", "Питер", "Пауль", "Франц", "Вильям", "Уильям",
    "Альфонс", "Ганс", "Франс", "Филиппо", "Андреа", "Корнелис", "Фрэнк", "Леонардо",
    "Джеймс", "Отто", "жан-пьер", "Джованни", "Джозеф", "Педро", "Адольф", "Уолтер",
    "Антонио", "Якоб", "Эсташ", "Адрианс", "Франческо", "Доменико", "Ханс", "Гун",
    "Шарль", "Хендрик", "Амброзиус", "Таддео", "Фердинанд", "Джошуа", "Изак", "Иоганн",
    "Фридрих", "Эмиль", "Умберто", "Франсуа", "Ян", "Эрнст", "Георг", "Карл",
)

FOREIGN_FEMININE_NAMES = ("Бриджет", "Элизабет", "Маргарет", "Джанет", "Жаклин", "Эвелин")

FIRST_NAME_EXCEPTIONS = (
    "Лев", "Яков", "Вова", "Маша", "Ольга", "Еремей",
    "Исак", "Исаак", "Ева", "Ирина", "Элькин", "Мерлин", "Макс", "Алекс",
    "Мариа",
    *FOREIGN_FEMININE_NAMES,
)

INA_FIRST_NAMES = (
    "Мальвина", "Антонина", "Альбина", "Агриппина", "Фаина", "Карина", "Марина", "Валентина",
    "Калина", "Аделина", "Алина", "Ангелина", "Галина", "Каролина", "Павлина", "Полина",
    "Элина", "Мина", "Нина", "Дина",
)


# ---------------------------------------------------------------------------
# Masculine declension
# ---------------------------------------------------------------------------


def man_first_exceptions(ctx: EvaluationContext) -> bool:
    if ctx.is_named("Старший", "Младший"):
        return ctx.inflect(("его", "ему", "его", "им", "ем"), 2, rule=11)
    if ctx.is_named("Мариа"):
        # Альфонс Мариа Муха
        return ctx.inflect(("и", "и", "ю", "ей", "ии"), 1, rule=12)
    return False


def man_rule_1(ctx: EvaluationContext) -> bool:
    """First names on -ь and -й decline like masculine nouns."""
    if not contains(ctx.last(1), "ьй"):
        return False
    if ctx.is_named("Дель"):
        return ctx.keep(rule=101)
    if ctx.last(2, 1) != "и":
        return ctx.inflect(("я", "ю", "я", "ем", "е"), 1, rule=102)
    return ctx.inflect(("я", "ю", "я", "ем", "и"), 1, rule=103)


def man_rule_2(ctx: EvaluationContext) -> bool:
    """First names on a hard consonant."""
    if not contains(ctx.last(1), CONSONANTS):
        return False
    if ctx.is_named("Павел"):
        return ctx.literal(("Павел", "Павла", "Павлу", "Павла", "Павлом", "Павле"), rule=201)
    if ctx.is_named("Лев"):
        return ctx.literal(("Лев", "Льва", "Льву", "Льва", "Львом", "Льве"), rule=202)
    if ctx.is_named("ван"):
        return ctx.keep(rule=203)
    return ctx.inflect(("а", "у", "а", "ом", "е"), rule=204)


def man_rule_3(ctx: EvaluationContext) -> bool:
    """First names on -а and -я."""
    if ctx.last(1) == "а":
        if ctx.is_named("фра", "Дега", "Андреа", "Сёра", "Сера"):
            return ctx.keep(rule=301)
        if not contains(ctx.last(2, 1), "кшгх"):
            return ctx.inflect(("ы", "е", "у", "ой", "е"), 1, rule=302)
        return ctx.inflect(("и", "е", "у", "ой", "е"), 1, rule=303)
    if ctx.last(1) == "я":
        return ctx.inflect(("и", "е", "ю", "ей", "е"), 1, rule=303)
    return False


def man_rule_4(ctx: EvaluationContext) -> bool:
    """Surnames on -ь and -й."""
    if not contains(ctx.last(1), "ьй"):
        return False
    if ctx.last(3) == "бей":
        # Воробей
        return ctx.inflect(("ья", "ью", "ья", "ьем", "ье"), 2, rule=400)
    if ctx.last(3, 1) == "а" or contains(ctx.last(2, 1), "ел"):
        return ctx.inflect(("я", "ю", "я", "ем", "е"), 1, rule=401)
    if ctx.last(2, 1) == "ы" or ctx.last(3, 1) == "т":
        # Толстой
        return ctx.inflect(("ого", "ому", "ого", "ым", "ом"), 2, rule=402)
    if ctx.last(3) == "чий":
        # Лесничий
        return ctx.inflect(("ьего", "ьему", "ьего", "ьим", "ьем"), 2, rule=403)
    if not contains(ctx.last(2, 1), VOWELS) or ctx.last(2, 1) == "и":
        return ctx.inflect(("ого", "ому", "ого", "им", "ом"), 2, rule=404)
    return ctx.keep(rule=405)


def man_rule_5(ctx: EvaluationContext) -> bool:
    """Surnames on -к."""
    if ctx.last(1) != "к":
        return False
    if ctx.last(4) in ("енок", "ёнок"):
        return ctx.inflect(("ка", "ку", "ка", "ком", "ке"), 2, rule=501)
    if ctx.last(2, 1) == "е" and ctx.last(3, 1) != "р":
        return ctx.inflect(("ька", "ьку", "ька", "ьком", "ьке"), 2, rule=502)
    return ctx.inflect(("а", "у", "а", "ом", "е"), rule=503)


def man_rule_6(ctx: EvaluationContext) -> bool:
    """Surnames on other consonants: -ем, -ом or -ым in the instrumental."""
    if ctx.last(1) == "ч":
        return ctx.inflect(("а", "у", "а", "ем", "е"), rule=601)
    if ctx.last(2) == "ец":
        # fleeting е
        return ctx.inflect(("ца", "цу", "ца", "цом", "це"), 2, rule=604)
    if contains(ctx.last(1), "цсршмхт"):
        return ctx.inflect(("а", "у", "а", "ом", "е"), rule=602)
    if contains(ctx.last(1), CONSONANTS):
        return ctx.inflect(("а", "у", "а", "ым", "е"), rule=603)
    return False


def man_rule_7(ctx: EvaluationContext) -> bool:
    """Surnames on -а and -я."""
    if ctx.last(1) == "а":
        if ctx.is_named("да"):
            return ctx.keep(rule=701)
        if ctx.last(2, 1) == "ш":
            return ctx.inflect(("и", "е", "у", "ей", "е"), 1, rule=702)
        if contains(ctx.last(2, 1), "хкг"):
            return ctx.inflect(("и", "е", "у", "ой", "е"), 1, rule=703)
        return ctx.inflect(("ы", "е", "у", "ой", "е"), 1, rule=704)
    if ctx.last(1) == "я":
        return ctx.inflect(("ой", "ой", "ую", "ой", "ой"), 2, rule=705)
    return False


def man_rule_8(ctx: EvaluationContext) -> bool:
    """Indeclinable surnames (-ово, -их, -ко, ...)."""
    if ctx.last(3) in INDECLINABLE_3 or ctx.last(2) in INDECLINABLE_2:
        if ctx.is_named("рерих"):
            return False
        return ctx.keep(rule=8)
    return False


def man_patronymic(ctx: EvaluationContext) -> bool:
    if ctx.is_named("Ильич"):
        return ctx.inflect(("а", "у", "а", "ом", "е"), rule=1)
    if ctx.last(2) == "ич":
        return ctx.inflect(("а", "у", "а", "ем", "е"), rule=2)
    return False


# ---------------------------------------------------------------------------
# Feminine declension
# ---------------------------------------------------------------------------


def woman_rule_1(ctx: EvaluationContext) -> bool:
    """Names on -а (not -иа)."""
    if ctx.last(1) != "а" or ctx.last(2, 1) == "и":
        return False
    if not contains(ctx.last(2, 1), "шхкг"):
        return ctx.inflect(("ы", "е", "у", "ой", "е"), 1, rule=101)
    if ctx.last(2, 1) == "ш":
        return ctx.inflect(("и", "е", "у", "ей", "е"), 1, rule=102)
    return ctx.inflect(("и", "е", "у", "ой", "е"), 1, rule=103)


def woman_rule_2(ctx: EvaluationContext) -> bool:
    """Names on -я, -ья, -ия, -ея."""
    if ctx.last(1) != "я":
        return False
    if ctx.last(2, 1) != "и":
        return ctx.inflect(("и", "е", "ю", "ей", "е"), 1, rule=201)
    return ctx.inflect(("и", "и", "ю", "ей", "и"), 1, rule=202)


def woman_rule_3(ctx: EvaluationContext) -> bool:
    """Names on a soft sign decline like "дочь"."""
    if ctx.last(1) == "ь":
        return ctx.inflect(("и", "и", "ь", "ью", "и"), 1, rule=3)
    return False


def woman_rule_4(ctx: EvaluationContext) -> bool:
    """Surnames on -а and -я."""
    if ctx.last(1) == "а":
        if contains(ctx.last(2, 1), "гк"):
            return ctx.inflect(("и", "е", "у", "ой", "е"), 1, rule=401)
        if contains(ctx.last(2, 1), "ш"):
            return ctx.inflect(("и", "е", "у", "ей", "е"), 1, rule=402)
        return ctx.inflect(("ой", "ой", "у", "ой", "ой"), 1, rule=403)
    if ctx.last(1) == "я":
        return ctx.inflect(("ой", "ой", "ую", "ой", "ой"), 2, rule=404)
    return False


def woman_patronymic(ctx: EvaluationContext) -> bool:
    if ctx.last(2) == "на":
        return ctx.inflect(("ы", "е", "у", "ой", "е"), 1, rule=1)
    return False


# ---------------------------------------------------------------------------
# Gender signals
# ---------------------------------------------------------------------------


def gender_by_first_name(ctx: EvaluationContext) -> GenderScores:
    man = D(0)
    woman = D(0)
    if ctx.last(1) == "й":
        man += D("0.9")
    if ctx.last(2) in ("он", "ов", "ав", "ам", "ол", "ан", "рд", "мп", "по", "до", "др", "рт"):
        man += D("0.3")
    if contains(ctx.last(1), CONSONANTS):
        man += D("0.01")
    if ctx.last(1) == "ь":
        man += D("0.02")
    if ctx.last(2) in ("вь", "фь", "ль", "на"):
        woman += D("0.1")
    if ctx.last(2) == "ла":
        woman += D("0.04")
    if ctx.last(2) in ("то", "ма"):
        man += D("0.01")
    if ctx.last(3) in ("лья", "вва", "ока", "ука", "ита", "эль", "реа"):
        man += D("0.2")
    if ctx.last(3) == "има":
        woman += D("0.15")
    if ctx.last(3) in ("лия", "ния", "сия", "дра", "лла", "кла", "опа", "вия"):
        woman += D("0.5")
    if ctx.last(4) in ("льда", "фира", "нина", "лита", "алья"):
        woman += D("0.5")
    if ctx.is_named(*MASCULINE_NAMES):
        man += 10
    if ctx.is_named(*FOREIGN_FEMININE_NAMES):
        woman += 10
    if ctx.is_named("Берил"):
        # Берил Кук
        woman += D("0.05")
    return GenderScores(man, woman)


def gender_by_last_name(ctx: EvaluationContext) -> GenderScores:
    man = D(0)
    woman = D(0)
    if ctx.last(2) in ("ов", "ин", "ев", "ий", "ёв", "ый", "ын", "ой"):
        man += D("0.4")
    if ctx.last(3) in ("ова", "ина", "ева", "ёва", "ына", "мин"):
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


def classify_name_part(ctx: EvaluationContext) -> NamePartScores:
    token = ctx.token
    first = D(0)
    second = D(0)
    father = D(0)

    if ctx.last(3) in ("вна", "чна", "вич", "ьич"):
        father += 3
    if ctx.last(2) == "ша":
        first += D("0.5")
    if ctx.last(3) == "эль":
        first += D("0.5")

    # letters first names never end with
    if contains(ctx.last(1), "еёжхцочшщъыэю"):
        if ctx.is_named("Мауриц"):
            first += 10
        else:
            second += D("0.3")

    excluded = SURNAME_PAIR_EXCLUDES.get(ctx.last(2, 1))
    if excluded and not contains(ctx.last(1), excluded):
        second += D("0.4")

    # diminutives like Аня, Галя
    if ctx.last(1) == "я" and contains(ctx.last(3, 1), VOWELS):
        first += D("0.5")

    if contains(ctx.last(2, 1), "жчщъэю"):
        second += D("0.3")

    if ctx.last(1) == "ь":
        if ctx.last(3, 2) == "ел":
            # Нинель, Адель
            first += D("0.7")
        elif ctx.is_named("Лазарь", "Игорь", "Любовь"):
            first += 10
        else:
            second += D("0.3")
    elif contains(ctx.last(1), CONSONANTS + "ь") and contains(ctx.last(2, 1), CONSONANTS + "ь"):
        if ctx.last(2) not in ("др", "кт", "лл", "пп", "рд", "рк", "рп", "рт", "тр"):
            second += D("0.25")

    if ctx.last(3) == "тин" and contains(ctx.last(4, 1), "нст"):
        first += D("0.5")

    if ctx.is_named(*FIRST_NAME_EXCEPTIONS) or ctx.is_named(*MASCULINE_NAMES):
        first += 10

    if ctx.last(2) == "ли" and ctx.last(3, 1) != "а":
        second += D("0.4")

    if ctx.last(2) == "ян" and len(token) > 2 and not contains(ctx.last(3, 1), "ьи"):
        second += D("0.4")

    if ctx.last(2) == "ур" and not ctx.is_named("Артур", "Тимур"):
        second += D("0.4")

    if ctx.last(2) == "ик":
        # diminutives like Алик, Вадик
        if contains(ctx.last(3, 1), "лшхд"):
            first += D("0.3")
        else:
            second += D("0.4")

    if ctx.last(3) == "ина":
        if ctx.last(7) in ("атерина", "ристина"):
            first += 10
        elif ctx.is_named(*INA_FIRST_NAMES):
            first += 10
        else:
            second += D("0.4")

    if ctx.last(4) == "олай":
        first += D("0.6")

    if ctx.last(2) in (
        "ов", "ин", "ев", "ёв", "ый", "ын", "ой", "ук", "як", "ца", "ун", "ок", "ая", "ёк",
        "ив", "ус", "ак", "яр", "уз", "ах", "ай",
    ):
        second += D("0.4")

    if ctx.last(3) in (
        "ова", "ева", "ёва", "ына", "шен", "мей", "вка", "шир", "бан", "чий", "кий", "бей",
        "чан", "ган", "ким", "кан", "мар", "лис",
    ):
        second += D("0.4")

    if ctx.last(4) == "шена":
        second += D("0.4")

    if ctx.is_named("да", "валадон", "Данбар"):
        second += 10

    return NamePartScores(first_name=first, last_name=second, patronymic=father)


RUSSIAN = RulePack(
    language="ru",
    build="11072716",
    case_count=len(RussianCase),
    case_names=tuple(case.name.lower() for case in RussianCase),
    vowels=VOWELS,
    consonants=CONSONANTS,
    chains={
        (Gender.MASCULINE, NamePart.FIRST_NAME): ("man_first_exceptions", "man_1", "man_2", "man_3"),
        (Gender.FEMININE, NamePart.FIRST_NAME): ("woman_1", "woman_2", "woman_3"),
        (Gender.MASCULINE, NamePart.LAST_NAME): ("man_8", "man_4", "man_5", "man_6", "man_7"),
        (Gender.FEMININE, NamePart.LAST_NAME): ("woman_4",),
        (Gender.MASCULINE, NamePart.PATRONYMIC): ("man_patronymic",),
        (Gender.FEMININE, NamePart.PATRONYMIC): ("woman_patronymic",),
    },
    rules={
        "man_first_exceptions": man_first_exceptions,
        "man_1": man_rule_1,
        "man_2": man_rule_2,
        "man_3": man_rule_3,
        "man_4": man_rule_4,
        "man_5": man_rule_5,
        "man_6": man_rule_6,
        "man_7": man_rule_7,
        "man_8": man_rule_8,
        "man_patronymic": man_patronymic,
        "woman_1": woman_rule_1,
        "woman_2": woman_rule_2,
        "woman_3": woman_rule_3,
        "woman_4": woman_rule_4,
        "woman_patronymic": woman_patronymic,
    },
    gender_scorers={
        NamePart.FIRST_NAME: gender_by_first_name,
        NamePart.LAST_NAME: gender_by_last_name,
        NamePart.PATRONYMIC: gender_by_patronymic,
    },
    classifier=classify_name_part,
)
