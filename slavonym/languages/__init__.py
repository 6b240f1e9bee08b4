"""
Registry of language rule packs.

Packs are looked up by language identifier or alias:

    >>> get_rule_pack("ua").language
    'uk'
"""
from __future__ import annotations

import logging

from slavonym.languages.russian import RUSSIAN
from slavonym.languages.ukrainian import UKRAINIAN
from slavonym.services.rules import RulePack
from slavonym.types import RulePackError, UnsupportedLanguageError

_PACKS: dict[str, RulePack] = {}


def register_rule_pack(pack: RulePack) -> RulePack:
    """Validate ``pack`` and make it available under its language and aliases."""
    try:
        pack.validate()
    except RulePackError as e:
        logging.warning(f"Rejected rule pack '{pack.language}': {e}")
        raise
    for key in (pack.language, *pack.aliases):
        key = key.lower()
        if key in _PACKS and _PACKS[key] is not pack:
            logging.info(f"Replacing rule pack registered for '{key}'")
        _PACKS[key] = pack
    logging.info(f"Registered rule pack '{pack.language}' (build {pack.build}, {pack.case_count} cases)")
    return pack


def get_rule_pack(language: str) -> RulePack:
    try:
        return _PACKS[language.lower()]
    except KeyError:
        raise UnsupportedLanguageError(
            f"no rule pack for language '{language}'. Available: {', '.join(supported_languages())}",
        ) from None


def supported_languages() -> list[str]:
    return sorted(_PACKS)


register_rule_pack(RUSSIAN)
register_rule_pack(UKRAINIAN)

__all__ = [
    "RUSSIAN",
    "UKRAINIAN",
    "get_rule_pack",
    "register_rule_pack",
    "supported_languages",
]
