# errors.py
from __future__ import annotations


class EnigmaError(ValueError):
    """Base class for every structural violation the machine can detect."""


# ── configuration ─────────────────────────────────────────────────
class ConfigFormatError(EnigmaError):
    pass


class DuplicateInCycles(ConfigFormatError):
    pass


class InvalidAlphabet(EnigmaError):
    pass


class InvalidSymbol(EnigmaError):
    pass


class IndexOutOfRange(EnigmaError, IndexError):
    pass


# ── rotor assembly ────────────────────────────────────────────────
class RotorAssemblyError(EnigmaError):
    pass


class WrongRotorCount(RotorAssemblyError):
    pass


class UnknownRotorName(RotorAssemblyError):
    pass


class ReflectorNotDerangement(RotorAssemblyError):
    pass


# ── per-message settings ──────────────────────────────────────────
class SettingError(EnigmaError):
    pass


class WrongSettingLength(SettingError):
    pass


class SymbolNotInAlphabet(SettingError):
    pass


class MessageSymbolError(EnigmaError):
    pass


__all__ = [
    "EnigmaError",
    "ConfigFormatError",
    "DuplicateInCycles",
    "InvalidAlphabet",
    "InvalidSymbol",
    "IndexOutOfRange",
    "RotorAssemblyError",
    "WrongRotorCount",
    "UnknownRotorName",
    "ReflectorNotDerangement",
    "SettingError",
    "WrongSettingLength",
    "SymbolNotInAlphabet",
    "MessageSymbolError",
]
