# main.py
from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from contextlib import nullcontext
from dataclasses import dataclass
from typing import IO, ContextManager

from debug import COMPONENTS, Debug
from errors import ConfigFormatError, EnigmaError
from machine import Machine
from suites import NAVAL_CONFIG
from utilities import (
    SETUP_MARK,
    format_groups,
    load_config,
    preprocess_message,
    read_config,
    setup_machine,
)

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration
# ────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class Config:
    """Runtime switches that influence input handling and output."""

    block: int = 5                  # display group size
    verbose: bool = False           # per-symbol trace on stderr
    log_to: str | None = None       # also write the trace to this file
    trace: tuple[str, ...] = ()     # components traced without --verbose
    mute: tuple[str, ...] = ()      # components silenced under --verbose


# ────────────────────────────────────────────────────────────────────────
#  1. Message processing
# ────────────────────────────────────────────────────────────────────────


def process(machine: Machine, lines: Iterable[str], cfg: Config) -> Iterator[str]:
    """Yield one output line per message line of LINES.

    Setup lines (starting with '*') re-configure MACHINE and produce no
    output.  Every other line is converted with its whitespace removed and
    shown in groups of `cfg.block`.
    """
    configured = False
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line.startswith(SETUP_MARK):
            setup_machine(machine, line)
            configured = True
            continue
        if not configured:
            if not line.strip():
                continue
            raise ConfigFormatError("No rotors in machine: input must begin with a setup line")

        yield format_groups(machine.convert(preprocess_message(line)), cfg.block)


# ────────────────────────────────────────────────────────────────────────
#  2. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="enigma", description="Encrypt or decrypt messages with a rotor machine")
    p.add_argument("input", nargs="?", metavar="INPUT", help="Message file. Default: standard input.")
    p.add_argument("output", nargs="?", metavar="OUTPUT", help="Result file. Default: standard output.")
    p.add_argument("--config", metavar="FILE", help="Machine configuration file. Default: the built-in Naval wheels.")
    p.add_argument("--block", type=int, default=5, help="Output group size. Default: 5")
    p.add_argument("--verbose", action="store_true", help="Trace every rotor setting and signal path on stderr.")
    p.add_argument("--trace", action="append", default=[], choices=COMPONENTS, metavar="COMPONENT",
                   help=f"Trace only COMPONENT; repeatable. One of: {', '.join(COMPONENTS)}.")
    p.add_argument("--mute", action="append", default=[], choices=COMPONENTS, metavar="COMPONENT",
                   help="Silence COMPONENT in the --verbose trace; repeatable.")
    p.add_argument("--log-to", dest="log_to", metavar="FILE", help="With --verbose or --trace, also write the trace to FILE.")
    args = p.parse_args(argv)
    if args.block < 1:
        p.error("--block must be at least 1")
    return args


def _open_in(path: str | None) -> ContextManager[IO[str]]:
    if path is None:
        return nullcontext(sys.stdin)
    return open(path, "r", encoding="utf-8")


def _open_out(path: str | None) -> ContextManager[IO[str]]:
    if path is None:
        return nullcontext(sys.stdout)
    return open(path, "w", encoding="utf-8")


def run(args: argparse.Namespace, cfg: Config) -> None:
    debug = Debug(enabled=cfg.verbose or bool(cfg.trace))
    if debug.enabled:
        Debug.configure(log_to=cfg.log_to)
        if cfg.verbose:
            debug.enable_all()
        debug.enable(*cfg.trace)
        debug.disable(*cfg.mute)

    description = load_config(args.config) if args.config else read_config(NAVAL_CONFIG)
    machine = description.build(debug)

    with _open_in(args.input) as src, _open_out(args.output) as dst:
        for line in process(machine, src, cfg):
            print(line, file=dst)


# ────────────────────────────────────────────────────────────────────────
#  3. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    cfg = Config(
        block=args.block,
        verbose=args.verbose,
        log_to=args.log_to,
        trace=tuple(args.trace),
        mute=tuple(args.mute),
    )
    try:
        run(args, cfg)
    except (EnigmaError, OSError) as err:
        print(f"Error: {err}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
