# utilities.py
from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import List

from alphabet_and_permutation import Alphabet, Permutation
from debug import Debug
from errors import (
    ConfigFormatError,
    InvalidSymbol,
    SettingError,
    SymbolNotInAlphabet,
    WrongRotorCount,
    WrongSettingLength,
)
from machine import Machine
from rotor_and_reflector import Rotor, RotorKind

# ────────────────────────────────────────────────────────────────────────
#  0. Regex & trivial helpers
# ────────────────────────────────────────────────────────────────────────

_cycle_re = re.compile(r"^\(.*\)$")
SETUP_MARK = "*"


def _is_cycle(token: str) -> bool:
    return bool(_cycle_re.match(token))


def _read_int(tokens: List[str], at: int, what: str) -> int:
    if at >= len(tokens):
        raise ConfigFormatError(f"Format missing {what}")
    try:
        return int(tokens[at])
    except ValueError:
        raise ConfigFormatError(f"Format expected {what}, found {tokens[at]!r}") from None


# ────────────────────────────────────────────────────────────────────────
#  1. Machine description (configuration file)
# ────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class MachineDescription:
    """Everything a configuration file says about the hardware."""

    alphabet: Alphabet
    num_rotors: int
    num_pawls: int
    rotors: List[Rotor]

    def build(self, debug: Debug | None = None) -> Machine:
        return Machine(
            self.alphabet, self.num_rotors, self.num_pawls, self.rotors, debug=debug
        )

    def names_of(self, kind: RotorKind) -> List[str]:
        return [r.name for r in self.rotors if r.kind is kind]


def read_config(text: str) -> MachineDescription:
    """Parse configuration TEXT: alphabet, slot & pawl counts, rotor catalog."""
    tokens = text.split()
    if not tokens:
        raise ConfigFormatError("Format missing alphabet")

    alphabet = Alphabet(tokens[0])

    num_rotors = _read_int(tokens, 1, "rotor count")
    num_pawls = _read_int(tokens, 2, "pawl count")

    rotors: List[Rotor] = []
    i = 3
    while i < len(tokens):
        name = tokens[i]
        if _is_cycle(name):
            raise ConfigFormatError(f"Cycle {name} has no rotor name")
        if any(r.name == name for r in rotors):
            raise ConfigFormatError(f"Rotor {name} described twice")
        if i + 1 >= len(tokens):
            raise ConfigFormatError(f"Rotor {name}: description truncated")
        type_token = tokens[i + 1]
        i += 2

        cycles: List[str] = []
        while i < len(tokens) and _is_cycle(tokens[i]):
            cycles.append(tokens[i])
            i += 1
        rotors.append(_read_rotor(name, type_token, " ".join(cycles), alphabet))

    return MachineDescription(alphabet, num_rotors, num_pawls, rotors)


def _read_rotor(name: str, type_token: str, cycles: str, alphabet: Alphabet) -> Rotor:
    letter, notches = type_token[0], type_token[1:]
    try:
        kind = RotorKind(letter)
    except ValueError:
        raise ConfigFormatError(f"Rotor {name}: invalid type {type_token!r}") from None

    if kind is RotorKind.MOVING and not notches:
        raise ConfigFormatError(f"Moving rotor {name} must have notches")
    if kind is not RotorKind.MOVING and notches:
        raise ConfigFormatError(f"Rotor {name}: only moving rotors have notches")

    return Rotor(name, Permutation(cycles, alphabet), kind, notches)


def load_config(path: str | Path) -> MachineDescription:
    return read_config(Path(path).read_text(encoding="utf-8"))


# ────────────────────────────────────────────────────────────────────────
#  2. Setup lines & ring settings
# ────────────────────────────────────────────────────────────────────────


def ringstellung(machine: Machine, initial: str, ring: str) -> str:
    """Apply RING to every inserted rotor's notches; return the shifted INITIAL."""
    machine.check_setting(initial)
    machine.check_setting(ring, "ring setting")
    alpha = machine.alphabet

    def shift(ch: str, by: str) -> str:
        return alpha.symbol_at(alpha.wrap(alpha.index_of(ch) - alpha.index_of(by)))

    for i in range(1, machine.num_rotors):
        rotor = machine.rotor(i)
        rotor.set_notches("".join(shift(n, ring[i - 1]) for n in rotor.notches))

    return "".join(shift(ch, r) for ch, r in zip(initial, ring))


def setup_machine(machine: Machine, settings: str) -> None:
    """Configure MACHINE from a setup line such as
    ``* B Beta III IV I AXLE [RING] (YF) (ZH)``.

    Order matters: rotors are inserted (which resets their notches), the ring
    setting re-mutates the fresh notches, then the rotors are turned and the
    plugboard wired.
    """
    if not settings.startswith(SETUP_MARK):
        raise ConfigFormatError("Setup line must start with '*'")
    tokens = settings[len(SETUP_MARK):].split()
    n = machine.num_rotors
    if len(tokens) < n:
        raise WrongRotorCount(f"Not enough rotors: need {n}, got {len(tokens)}")

    names, rest = tokens[:n], tokens[n:]
    machine.insert_rotors(names)

    if not rest or _is_cycle(rest[0]):
        raise WrongSettingLength("Initial rotor setting missing")
    initial, rest = rest[0], rest[1:]

    if rest and not _is_cycle(rest[0]):
        initial = ringstellung(machine, initial, rest[0])
        rest = rest[1:]

    plugs: List[str] = []
    while rest and _is_cycle(rest[0]):
        plugs.append(rest.pop(0))
    if rest:
        raise SettingError(f"Unexpected settings: {' '.join(rest)}")

    machine.set_rotors(initial)
    try:
        plugboard = Permutation(" ".join(plugs), machine.alphabet)
    except InvalidSymbol as err:
        raise SymbolNotInAlphabet(f"Plugboard: {err}") from err
    machine.set_plugboard(plugboard)

    machine.debug.log(
        "setup", f"Rotors {' '.join(names)} at {machine.settings}, plugboard {plugboard!r}"
    )


# ────────────────────────────────────────────────────────────────────────
#  3. Text preprocessing
# ────────────────────────────────────────────────────────────────────────


def preprocess_message(msg: str) -> str:
    """Drop all whitespace; the words of a line are enciphered as one run."""
    return "".join(msg.split())


def format_groups(text: str, block: int = 5) -> str:
    """Split TEXT into BLOCK-sized groups; the last group may be shorter."""
    return " ".join(text[i : i + block] for i in range(0, len(text), block))


__all__ = [
    "MachineDescription",
    "read_config",
    "load_config",
    "ringstellung",
    "setup_machine",
    "preprocess_message",
    "format_groups",
]
