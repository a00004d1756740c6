# rotor_and_reflector.py
from __future__ import annotations

from enum import Enum

from alphabet_and_permutation import Alphabet, Permutation
from errors import ConfigFormatError, InvalidSymbol, ReflectorNotDerangement, SettingError


class RotorKind(Enum):
    """Wheel variants, valued by their configuration-file type letter."""

    MOVING = "M"
    FIXED = "N"
    REFLECTOR = "R"


class Rotor:
    """A wired wheel: a fixed Permutation seen through a rotational offset.

    One class covers all three variants; `kind` decides what the wheel may
    do.  Only MOVING wheels carry notches and advance, only REFLECTOR wheels
    fold the signal back, and a reflector never leaves its first position.
    Use the `moving`, `fixed` and `reflector` constructors.
    """

    def __init__(
        self,
        name: str,
        permutation: Permutation,
        kind: RotorKind = RotorKind.FIXED,
        notches: str = "",
    ) -> None:
        if kind is RotorKind.MOVING:
            _check_notches(notches, permutation.alphabet)
        elif notches:
            raise ConfigFormatError(f"Rotor {name}: only moving rotors have notches")
        if kind is RotorKind.REFLECTOR and not permutation.is_derangement:
            raise ReflectorNotDerangement(f"Reflector {name} must be a derangement")

        self.name = name
        self.permutation = permutation
        self.kind = kind
        self.position = 0

        self._base_notches = notches         # as wired, before any ring setting
        self._notches = notches
        self._previous_notches = notches

    @classmethod
    def moving(cls, name: str, permutation: Permutation, notches: str) -> "Rotor":
        return cls(name, permutation, RotorKind.MOVING, notches)

    @classmethod
    def fixed(cls, name: str, permutation: Permutation) -> "Rotor":
        return cls(name, permutation, RotorKind.FIXED)

    @classmethod
    def reflector(cls, name: str, permutation: Permutation) -> "Rotor":
        return cls(name, permutation, RotorKind.REFLECTOR)

    # ── variant queries ──────────────────────────────────────────
    @property
    def alphabet(self) -> Alphabet:
        return self.permutation.alphabet

    @property
    def size(self) -> int:
        return self.permutation.size

    @property
    def rotates(self) -> bool:
        return self.kind is RotorKind.MOVING

    @property
    def reflecting(self) -> bool:
        return self.kind is RotorKind.REFLECTOR

    # ── setting ──────────────────────────────────────────────────
    @property
    def setting(self) -> str:
        """The symbol currently showing in the window."""
        return self.alphabet.symbol_at(self.position)

    def set(self, posn: int | str) -> None:
        """Turn to POSN, given either as an index (wrapped) or a symbol."""
        if isinstance(posn, str):
            target = self.alphabet.index_of(posn)
        else:
            target = self.alphabet.wrap(posn)
        if self.reflecting and target != 0:
            raise SettingError(f"Reflector {self.name} cannot be turned")
        self.position = target

    # ── ring & notch helpers ─────────────────────────────────────
    @property
    def notches(self) -> str:
        return self._notches

    @property
    def previous_notches(self) -> str:
        return self._previous_notches

    def set_notches(self, notches: str) -> None:
        """Replace the notches, remembering the old ones.  Ignored unless moving."""
        if not self.rotates:
            return
        _check_notches(notches, self.alphabet)
        self._previous_notches = self._notches
        self._notches = notches

    def restore_notches(self) -> None:
        """Undo the most recent `set_notches`.

        Only one level is remembered, so a second call swaps back again.
        Use `reset_notches` to return to the notches the rotor was built with.
        """
        self.set_notches(self._previous_notches)

    def reset_notches(self) -> None:
        """Return to the notches given at construction."""
        self.set_notches(self._base_notches)

    # ── stepping ─────────────────────────────────────────────────
    def at_notch(self) -> bool:
        """True iff I am positioned to push the rotor on my left."""
        return self.rotates and self.setting in self._notches

    def advance(self) -> None:
        if self.rotates:
            self.set(self.position + 1)

    # ── signal paths ─────────────────────────────────────────────
    def convert_forward(self, p: int) -> int:
        contact = self.alphabet.wrap(p + self.position)
        result = self.permutation.permute(contact)
        return self.alphabet.wrap(result - self.position)

    def convert_backward(self, e: int) -> int:
        contact = self.alphabet.wrap(e + self.position)
        result = self.permutation.invert(contact)
        return self.alphabet.wrap(result - self.position)

    # ── niceties ─────────────────────────────────────────────────
    def __repr__(self) -> str:
        extra = f" notches={self._notches!r}" if self.rotates else ""
        return f"<Rotor {self.name} {self.kind.name} setting={self.setting}{extra}>"


def _check_notches(notches: str, alphabet: Alphabet) -> None:
    for ch in notches:
        if ch not in alphabet:
            raise InvalidSymbol(f"Notch {ch!r} is not on the wheel")
