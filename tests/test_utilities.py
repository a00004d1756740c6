import pytest

from errors import (
    ConfigFormatError,
    InvalidAlphabet,
    InvalidSymbol,
    ReflectorNotDerangement,
    RotorAssemblyError,
    SettingError,
    SymbolNotInAlphabet,
    WrongRotorCount,
    WrongSettingLength,
)
from rotor_and_reflector import RotorKind
from suites import NAVAL, NAVAL_CONFIG
from utilities import (
    format_groups,
    load_config,
    preprocess_message,
    read_config,
    ringstellung,
    setup_machine,
)

SMALL_CONFIG = """
ABCD
3 1
F  N     (AB)
      (C)
Go MA    (ABCD)
R  R     (AC)(BD)
"""


# ── configuration file ────────────────────────────────────────────


def test_read_naval_config(naval):
    assert str(naval.alphabet) == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    assert naval.num_rotors == 5
    assert naval.num_pawls == 3
    assert [r.name for r in naval.rotors] == list(NAVAL)
    assert naval.names_of(RotorKind.REFLECTOR) == ["B", "C"]
    assert naval.names_of(RotorKind.FIXED) == ["Beta", "Gamma"]
    vi = next(r for r in naval.rotors if r.name == "VI")
    assert vi.notches == "ZM"


def test_cycles_may_span_lines_and_touch():
    desc = read_config(SMALL_CONFIG)
    fixed, moving, refl = desc.rotors
    assert fixed.kind is RotorKind.FIXED
    assert fixed.permutation.cycles == ((0, 1), (2,))
    assert moving.kind is RotorKind.MOVING and moving.notches == "A"
    assert refl.permutation.cycles == ((0, 2), (1, 3))


def test_small_config_builds_working_machine():
    machine = read_config(SMALL_CONFIG).build()
    setup_machine(machine, "* R F Go BA")
    cipher = machine.convert("ABCDDCBA")
    setup_machine(machine, "* R F Go BA")
    assert machine.convert(cipher) == "ABCDDCBA"


def test_load_config(tmp_path):
    path = tmp_path / "naval.conf"
    path.write_text(NAVAL_CONFIG, encoding="utf-8")
    assert len(load_config(path).rotors) == len(NAVAL)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "ABCD",
        "ABCD 3",
        "ABCD three 1",
        "ABCD 3 x",
        "ABCD 3 1 F",                      # truncated rotor
        "ABCD 3 1 Go M (ABCD)",            # moving rotor without notch
        "ABCD 3 1 F NA (AB)",              # notch on fixed rotor
        "ABCD 3 1 R RA (AC) (BD)",         # notch on reflector
        "ABCD 3 1 F X (AB)",               # unknown type
        "ABCD 3 1 F N (AB) F N (CD)",      # duplicate name
        "ABCD 3 1 (AB) F N",               # cycle without a name
    ],
)
def test_config_format_errors(text):
    with pytest.raises(ConfigFormatError):
        read_config(text)


@pytest.mark.parametrize("alphabet", ["AB*D", "AB(D", "ABC)", "ABCA"])
def test_config_alphabet_errors(alphabet):
    with pytest.raises(InvalidAlphabet):
        read_config(f"{alphabet} 3 1")


def test_config_notch_off_wheel():
    with pytest.raises(InvalidSymbol):
        read_config("ABCD 3 1 Go MZ (ABCD)")


def test_config_reflector_not_derangement():
    with pytest.raises(ReflectorNotDerangement):
        read_config("ABCD 3 1 R R (AC)")


# ── setup lines ───────────────────────────────────────────────────


def test_setup_line(naval):
    machine = naval.build()
    setup_machine(machine, "* B Beta III IV I AXLE (HQ) (EX) (IP) (TR) (BY)")
    assert machine.settings == "AXLE"
    assert machine.plugboard.permute_symbol("H") == "Q"
    assert machine.convert("FROMHISSHOULDERHIAWATHA") == "QVPQSOKOILPUBKJZPISFXDW"


def test_setup_line_without_plugboard(naval):
    machine = naval.build()
    setup_machine(machine, "*B Beta III IV I AXLE")
    assert machine.settings == "AXLE"
    assert machine.plugboard.permute_symbol("H") == "H"


def test_neutral_ring_changes_nothing(naval):
    machine = naval.build()
    setup_machine(machine, "* B Beta III IV I AXLE AAAA (HQ) (EX) (IP) (TR) (BY)")
    assert machine.convert("FROMHISSHOULDERHIAWATHA") == "QVPQSOKOILPUBKJZPISFXDW"


def test_ring_setting_shifts_notches_and_window(naval):
    machine = naval.build()
    setup_machine(machine, "* B Beta III IV I AXLE BBBB")
    assert machine.settings == "ZWKD"
    assert [machine.rotor(k).notches for k in range(1, 5)] == ["", "U", "I", "P"]
    assert machine.rotor(4).previous_notches == "Q"

    setup_machine(machine, "* B Beta III IV I AXLE")
    assert [machine.rotor(k).notches for k in range(1, 5)] == ["", "V", "J", "Q"]


def test_ring_setting_keeps_turnover_window(naval):
    # rotor I still pushes its neighbour when the window letter is Q
    machine = naval.build()
    setup_machine(machine, "* B Beta III IV I AAAQ CCCC")
    assert machine.settings == "YYYO"
    assert machine.rotor(4).at_notch()
    machine.convert("A")
    assert machine.settings == "YYZP"


def test_ringstellung_helper(naval):
    machine = naval.build()
    machine.insert_rotors(["B", "Beta", "III", "IV", "I"])
    assert ringstellung(machine, "AAAA", "ABCD") == "AZYX"
    with pytest.raises(WrongSettingLength):
        ringstellung(machine, "AAAA", "ABC")
    with pytest.raises(SymbolNotInAlphabet):
        ringstellung(machine, "AAAA", "ABC?")
    with pytest.raises(WrongSettingLength):
        ringstellung(machine, "AAA", "ABCD")


@pytest.mark.parametrize(
    "line, error",
    [
        ("B Beta III IV I AXLE", ConfigFormatError),
        ("* B Beta III", WrongRotorCount),
        ("* B Beta III IV I", WrongSettingLength),
        ("* B Beta III IV I (AB)", WrongSettingLength),
        ("* B Beta III IV I AXL", WrongSettingLength),
        ("* B Beta III IV I AXLE ZZ", WrongSettingLength),
        ("* B Beta III IV I AXLE (AB) QQ", SettingError),
        ("* B Beta III IV I AXLE AAAA BBBB", SettingError),
        ("* B Beta III IV I AXLE (A1)", SymbolNotInAlphabet),
        ("* B Beta III IV I AX?E", SymbolNotInAlphabet),
        ("* B Beta III IV I AX?E AAAA", SymbolNotInAlphabet),
        ("* B Beta III IV I AXL AAAA", WrongSettingLength),
        ("* B Beta III IV III AXLE", RotorAssemblyError),
        ("* B Beta III IV IX AXLE", RotorAssemblyError),
        ("* B Beta III IV I AXLE (AB) (BC)", ConfigFormatError),
    ],
)
def test_setup_line_errors(naval, line, error):
    with pytest.raises(error):
        setup_machine(naval.build(), line)


# ── message text ──────────────────────────────────────────────────


def test_preprocess_message():
    assert preprocess_message("  FROM his\tSHOULDER \r\n") == "FROMhisSHOULDER"
    assert preprocess_message("") == ""


@pytest.mark.parametrize(
    "text, block, grouped",
    [
        ("QVPQSOKOILPUBKJZPISFXDW", 5, "QVPQS OKOIL PUBKJ ZPISF XDW"),
        ("ABCDE", 5, "ABCDE"),
        ("ABCDEFG", 3, "ABC DEF G"),
        ("", 5, ""),
    ],
)
def test_format_groups(text, block, grouped):
    assert format_groups(text, block) == grouped
