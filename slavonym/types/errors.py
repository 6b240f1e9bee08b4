"""Exceptions raised by slavonym."""


class RulePackError(RuntimeError):
    """A language rule pack is malformed (unknown rule id, bad case vector)."""


class UnsupportedLanguageError(ValueError):
    """No rule pack is registered for the requested language identifier."""
