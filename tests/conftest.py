import pytest

from alphabet_and_permutation import Alphabet, Permutation
from machine import Machine
from rotor_and_reflector import Rotor
from suites import NAVAL_CONFIG
from utilities import read_config

# Wheels of the small three-rotor test machine.
SMALL_REFLECTOR = "(AZ) (BY) (CX) (DW) (EV) (FU) (GT) (HS) (IR) (JQ) (KP) (LO) (MN)"
SMALL_WHEELS = {
    "I": ("(WORDLE) (IS) (FUN)", "A"),
    "II": ("(TEARS) (BOING) (LUCKY)", "B"),
    "III": ("(QUACK) (FROZE) (TWINS) (GLYPH)", "M"),
}


@pytest.fixture
def az():
    return Alphabet()


@pytest.fixture
def naval():
    return read_config(NAVAL_CONFIG)


@pytest.fixture
def naval_machine(naval):
    machine = naval.build()
    machine.insert_rotors(["B", "Beta", "III", "IV", "I"])
    machine.set_rotors("AXLE")
    return machine


def _small_catalog(alphabet):
    rotors = [Rotor.reflector("B", Permutation(SMALL_REFLECTOR, alphabet))]
    for name, (cycles, notches) in SMALL_WHEELS.items():
        rotors.append(Rotor.moving(name, Permutation(cycles, alphabet), notches))
    return rotors


@pytest.fixture
def small_machine(az):
    machine = Machine(az, 4, 3, _small_catalog(az))
    machine.insert_rotors(["B", "III", "II", "I"])
    machine.set_rotors("MAA")
    return machine


@pytest.fixture
def small_rotors(az):
    return _small_catalog(az)
