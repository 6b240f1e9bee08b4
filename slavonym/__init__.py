"""
Slavonym: Russian and Ukrainian Personal Name Declension Library

Declines first names, surnames and patronymics into every grammatical case,
detecting name parts and gender when they are not given.
"""

__version__ = "0.4.1"

__all__ = [
    "DeclensionConfig",
    "Gender",
    "NameCaseEngine",
    "NamePart",
    "RussianCase",
    "UkrainianCase",
]

_TYPE_EXPORTS = {"DeclensionConfig", "Gender", "NamePart", "RussianCase", "UkrainianCase"}


def __getattr__(name):
    """Lazy import so the rule packs load on first use."""
    if name == "NameCaseEngine":
        from .engine import NameCaseEngine
        return NameCaseEngine
    if name in _TYPE_EXPORTS:
        from . import types
        return getattr(types, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
