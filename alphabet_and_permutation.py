# alphabet_and_permutation.py
from __future__ import annotations

import re
import string
from collections.abc import Iterator

from errors import (
    ConfigFormatError,
    DuplicateInCycles,
    IndexOutOfRange,
    InvalidAlphabet,
    InvalidSymbol,
)

RESERVED = "*()"                 # setup marker and cycle brackets

_CYCLES_RE = re.compile(r"(?:\([^()]+\))*")
_GROUP_RE = re.compile(r"\(([^()]+)\)")


# ── Alphabet ──────────────────────────────────────────────────────
class Alphabet:
    """An ordered set of encodable symbols; symbol K has index K."""

    def __init__(self, symbols: str = string.ascii_uppercase) -> None:
        if not symbols:
            raise InvalidAlphabet("Alphabet must contain at least one symbol")
        banned = [ch for ch in RESERVED if ch in symbols]
        if banned:
            raise InvalidAlphabet(f"Banned characters in alphabet: {''.join(banned)}")
        seen: set[str] = set()
        for ch in symbols:
            if ch in seen:
                raise InvalidAlphabet(f"Symbol {ch!r} appears twice in alphabet")
            seen.add(ch)

        self.symbols: str = symbols
        self.alpha_to_index: dict[str, int] = {
            ch: i for i, ch in enumerate(symbols)
        }

    @property
    def size(self) -> int:
        return len(self.symbols)

    def contains(self, symbol: str) -> bool:
        return symbol in self.alpha_to_index

    # symbol → integer signal
    def index_of(self, symbol: str) -> int:
        try:
            return self.alpha_to_index[symbol]
        except KeyError:
            raise InvalidSymbol(
                f"Invalid character {symbol!r} for current alphabet."
            ) from None

    # integer signal → symbol
    def symbol_at(self, index: int) -> str:
        if not (0 <= index < self.size):
            hi = self.size - 1
            raise IndexOutOfRange(f"Signal {index} out of range 0–{hi}")
        return self.symbols[index]

    def wrap(self, p: int) -> int:
        """Canonical non-negative representative of P modulo the size."""
        return p % self.size

    # niceties
    def __len__(self) -> int:
        return self.size

    def __contains__(self, symbol: object) -> bool:
        return symbol in self.alpha_to_index

    def __iter__(self) -> Iterator[str]:
        return iter(self.symbols)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self.symbols == other.symbols

    def __hash__(self) -> int:
        return hash(self.symbols)

    def __str__(self) -> str:
        return self.symbols

    def __repr__(self) -> str:
        return f"<Alphabet {self.symbols!r}>"


# ── Permutation ───────────────────────────────────────────────────
def parse_cycles(spec: str, alphabet: Alphabet) -> tuple[tuple[int, ...], ...]:
    """Turn "(ABC) (DE)" into index cycles, rejecting repeated symbols."""
    text = "".join(spec.split())
    if not _CYCLES_RE.fullmatch(text):
        raise ConfigFormatError(f"Malformed cycle specification: {spec!r}")

    used: set[str] = set()
    cycles: list[tuple[int, ...]] = []
    for group in _GROUP_RE.findall(text):
        for ch in group:
            if ch in used:
                raise DuplicateInCycles(f"Symbol {ch!r} repeated in cycles {spec!r}")
            used.add(ch)
        cycles.append(tuple(alphabet.index_of(ch) for ch in group))
    return tuple(cycles)


class Permutation:
    """A bijection on ALPHABET given in cycle notation.

    Symbols named in no cycle map to themselves.  Lookups go through two
    precomputed integer tables so both directions cost the same.
    """

    def __init__(self, cycles: str, alphabet: Alphabet) -> None:
        self.alphabet: Alphabet = alphabet
        self.spec: str = cycles
        self.cycles: tuple[tuple[int, ...], ...] = parse_cycles(cycles, alphabet)

        # integer lookup tables, identity outside the cycles
        self._fwd = list(range(alphabet.size))
        self._rev = list(range(alphabet.size))
        for cycle in self.cycles:
            for k, here in enumerate(cycle):
                there = cycle[(k + 1) % len(cycle)]
                self._fwd[here] = there
                self._rev[there] = here

    @classmethod
    def identity(cls, alphabet: Alphabet) -> "Permutation":
        return cls("", alphabet)

    @property
    def size(self) -> int:
        return self.alphabet.size

    def wrap(self, p: int) -> int:
        return self.alphabet.wrap(p)

    # ── index level ──────────────────────────────────────────────
    def permute(self, p: int) -> int:
        return self._fwd[self.wrap(p)]

    def invert(self, c: int) -> int:
        return self._rev[self.wrap(c)]

    # ── symbol level ─────────────────────────────────────────────
    def permute_symbol(self, ch: str) -> str:
        return self.alphabet.symbol_at(self.permute(self.alphabet.index_of(ch)))

    def invert_symbol(self, ch: str) -> str:
        return self.alphabet.symbol_at(self.invert(self.alphabet.index_of(ch)))

    @property
    def is_derangement(self) -> bool:
        """True iff no symbol maps to itself."""
        return sum(len(c) for c in self.cycles if len(c) > 1) == self.size

    def __repr__(self) -> str:
        groups = [
            "(" + "".join(self.alphabet.symbol_at(i) for i in cycle) + ")"
            for cycle in self.cycles
        ]
        return f"<Permutation {' '.join(groups)}>"
