# settings_generator.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from random import Random, SystemRandom
from typing import List

from errors import EnigmaError, RotorAssemblyError
from rotor_and_reflector import RotorKind
from suites import NAVAL_CONFIG
from utilities import MachineDescription, load_config, read_config

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(alpha: str, k: int, rng: Random | SystemRandom) -> List[str]:
    """Return *k* disjoint plug pairs."""
    max_possible = len(alpha) // 2
    k = min(k, max_possible)
    pool = list(alpha)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def random_setup_line(
    desc: MachineDescription,
    rng: Random | SystemRandom,
    *,
    pairs: int = 10,
    ring: bool = False,
) -> str:
    """Return a setup line that `setup_machine` accepts for DESC."""
    reflectors = desc.names_of(RotorKind.REFLECTOR)
    fixed = desc.names_of(RotorKind.FIXED)
    moving = desc.names_of(RotorKind.MOVING)
    n_fixed = desc.num_rotors - 1 - desc.num_pawls

    if not reflectors:
        raise RotorAssemblyError("Catalog has no reflector")
    if len(fixed) < n_fixed:
        raise RotorAssemblyError(f"Catalog has {len(fixed)} fixed rotors, need {n_fixed}")
    if len(moving) < desc.num_pawls:
        raise RotorAssemblyError(f"Catalog has {len(moving)} moving rotors, need {desc.num_pawls}")

    alpha = str(desc.alphabet)
    width = desc.num_rotors - 1

    names = [rng.choice(reflectors)] + rng.sample(fixed, n_fixed) + rng.sample(moving, desc.num_pawls)
    parts = ["*", *names, "".join(rng.choices(alpha, k=width))]
    if ring:
        parts.append("".join(rng.choices(alpha, k=width)))
    parts.extend(f"({p})" for p in choose_pairs(alpha, pairs, rng))
    return " ".join(parts)


def parse_cli(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate random setup lines for a rotor machine")
    p.add_argument("--config", metavar="FILE", help="Machine configuration file. Default: the built-in Naval wheels.")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument("--pairs", type=int, default=10, help="Plugboard pairs (default: 10)")
    p.add_argument("--ring", action="store_true", help="Include a random ring setting")
    p.add_argument("--count", type=int, default=1, help="Number of lines (default: 1)")
    p.add_argument("--outfile", type=Path, help="Destination file (default: standard output)")
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> None:
    args = parse_cli(argv)
    try:
        desc = load_config(args.config) if args.config else read_config(NAVAL_CONFIG)
        rng = build_rng(args.seed)
        lines = [
            random_setup_line(desc, rng, pairs=args.pairs, ring=args.ring)
            for _ in range(args.count)
        ]
        text = "\n".join(lines) + "\n"
        if args.outfile:
            args.outfile.write_text(text, encoding="utf-8")
        else:
            sys.stdout.write(text)
    except (EnigmaError, OSError) as err:
        print(f"Error: {err}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
