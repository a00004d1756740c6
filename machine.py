# machine.py  ─────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Iterable, Sequence
from copy import copy

from alphabet_and_permutation import Alphabet, Permutation
from debug import Debug
from errors import (
    ConfigFormatError,
    MessageSymbolError,
    RotorAssemblyError,
    SettingError,
    SymbolNotInAlphabet,
    UnknownRotorName,
    WrongRotorCount,
    WrongSettingLength,
)
from rotor_and_reflector import Rotor


class Machine:
    """A complete rotor machine.

    Slot 0 holds the reflector and slot `num_rotors - 1` the fast rotor.
    Rotors are chosen by name from the catalog handed to the constructor;
    each insertion works on fresh copies, so the catalog itself is never
    turned or re-ringed.
    """

    def __init__(
        self,
        alphabet: Alphabet,
        num_rotors: int,
        num_pawls: int,
        all_rotors: Iterable[Rotor],
        *,
        debug: Debug | None = None,
    ) -> None:
        if num_rotors <= 1:
            raise ConfigFormatError(f"Need more than one rotor slot, got {num_rotors}")
        if not (0 <= num_pawls < num_rotors):
            raise ConfigFormatError(
                f"Pawl count {num_pawls} must lie in 0–{num_rotors - 1}"
            )

        catalog: dict[str, Rotor] = {}
        for rotor in all_rotors:
            if rotor.name in catalog:
                raise ConfigFormatError(f"Rotor {rotor.name} described twice")
            if rotor.alphabet != alphabet:
                raise RotorAssemblyError(f"Rotor {rotor.name} uses a different alphabet")
            catalog[rotor.name] = rotor

        self._alphabet = alphabet
        self._num_rotors = num_rotors
        self._num_pawls = num_pawls
        self._catalog = catalog
        self._rotors: list[Rotor] = []
        self._plugboard = Permutation.identity(alphabet)
        self.debug = debug if debug is not None else Debug(enabled=False)

    # ── read-only accessors ─────────────────────────────────────
    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def num_rotors(self) -> int:
        return self._num_rotors

    @property
    def num_pawls(self) -> int:
        return self._num_pawls

    @property
    def catalog(self) -> dict[str, Rotor]:
        return dict(self._catalog)

    def rotor(self, k: int) -> Rotor:
        """Rotor in slot K; slot 0 is the reflector."""
        return self._slots()[k]

    @property
    def settings(self) -> str:
        """Window symbols of every slot right of the reflector."""
        return "".join(r.setting for r in self._slots()[1:])

    # ── rotor & key helpers ─────────────────────────────────────
    def insert_rotors(self, names: Sequence[str]) -> None:
        """Fill the slots with the catalog rotors NAMES (reflector first)."""
        if len(names) != self._num_rotors:
            raise WrongRotorCount(
                f"Expected {self._num_rotors} rotors, got {len(names)}"
            )

        slots: list[Rotor] = []
        for name in names:
            if any(r.name == name for r in slots):
                raise RotorAssemblyError(f"Rotor {name} repeated")
            try:
                template = self._catalog[name]
            except KeyError:
                raise UnknownRotorName(f"{name} has been misnamed.") from None
            rotor = copy(template)
            rotor.position = 0
            rotor.reset_notches()
            slots.append(rotor)

        self._check_layout(slots)
        self._rotors = slots
        self.debug.log("rotor", f"Inserted {' '.join(names)}")

    def _check_layout(self, slots: list[Rotor]) -> None:
        if not slots[0].reflecting:
            raise RotorAssemblyError("First rotor should reflect")

        moving = 0
        seen_moving = False
        for rotor in slots[1:]:
            if rotor.reflecting:
                raise RotorAssemblyError(f"Only the first slot can reflect, not {rotor.name}")
            if rotor.rotates:
                seen_moving = True
                moving += 1
            elif seen_moving:
                raise RotorAssemblyError(f"Moving rotor placed left of fixed rotor {rotor.name}")
        if moving != self._num_pawls:
            raise RotorAssemblyError(
                f"Wrong number of moving rotors: {moving} for {self._num_pawls} pawls"
            )

    def check_setting(self, setting: str, what: str = "setting") -> None:
        """Reject SETTING unless it has one symbol of my alphabet per non-reflector slot."""
        if len(setting) != self._num_rotors - 1:
            raise WrongSettingLength(
                f"{what.capitalize()} {setting!r} must have {self._num_rotors - 1} symbols"
            )
        for ch in setting:
            if ch not in self._alphabet:
                raise SymbolNotInAlphabet(f"The {what} {ch!r} is not on the wheel")

    def set_rotors(self, setting: str) -> None:
        """Turn each non-reflector slot to its symbol in SETTING (leftmost first)."""
        slots = self._slots()
        self.check_setting(setting)
        for rotor, ch in zip(slots[1:], setting):
            rotor.set(ch)

    @property
    def plugboard(self) -> Permutation:
        return self._plugboard

    def set_plugboard(self, plugboard: Permutation) -> None:
        if plugboard.alphabet != self._alphabet:
            raise SettingError("Plugboard uses a different alphabet")
        self._plugboard = plugboard
        self.debug.log("plugboard", f"Wired {plugboard!r}")

    # ── stepping logic  ─────────────────────────────────────────
    def advance_rotors(self) -> None:
        """Advance rotors one key-press, double-step included."""
        rotors = self._slots()
        last = self._num_rotors - 1
        stepped = [False] * self._num_rotors

        for i in range(1, last):
            if rotors[i + 1].at_notch() and not stepped[i] and rotors[i].rotates:
                rotors[i].advance()
                stepped[i] = True
                # the pushing rotor steps along with the rotor it pushed
                if i != last - 1 and not stepped[i + 1] and rotors[i + 1].rotates:
                    rotors[i + 1].advance()
                    stepped[i + 1] = True

        rotors[last].advance()

    # ── encipher  ───────────────────────────────────────────────
    def convert_index(self, c: int) -> int:
        """Advance the machine, then convert the signal C."""
        self.advance_rotors()
        if self.debug.active("stepping"):
            self.debug.log("stepping", f"Rotor settings {self.settings}")

        path = [c]
        c = self._plugboard.permute(c)
        path.append(c)
        c = self._apply_rotors(c, path)
        c = self._plugboard.invert(c)
        path.append(c)

        if self.debug.active("encipher"):
            trail = " -> ".join(self._alphabet.symbol_at(p) for p in path)
            self.debug.log("encipher", f"[{self.settings}] {trail}")
        return c

    def _apply_rotors(self, c: int, path: list[int]) -> int:
        rotors = self._rotors
        for rotor in reversed(rotors):
            c = rotor.convert_forward(c)
            path.append(c)
        for rotor in rotors[1:]:
            c = rotor.convert_backward(c)
            path.append(c)
        return c

    def convert(self, msg: str) -> str:
        """Encode or decode MSG, stepping the rotors once per symbol."""
        for ch in msg:
            if ch not in self._alphabet:
                raise MessageSymbolError(f"Symbol {ch!r} not in alphabet")
        alpha = self._alphabet
        return "".join(alpha.symbol_at(self.convert_index(alpha.index_of(ch))) for ch in msg)

    # ── helpers ─────────────────────────────────────────────────
    def _slots(self) -> list[Rotor]:
        if not self._rotors:
            raise RotorAssemblyError("No rotors in machine")
        return self._rotors

    def __repr__(self) -> str:
        names = " ".join(r.name for r in self._rotors) or "empty"
        return f"<Machine {names} pawls={self._num_pawls}>"
