from typing import Dict, Tuple

Alpha26 = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Naval wheels in cycle notation: name -> (type letter, notches, cycles)
NAVAL: Dict[str, Tuple[str, str, str]] = {
    "I":     ("M", "Q",  "(AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)"),
    "II":    ("M", "E",  "(FIXVYOMW) (CDKLHUP) (ESZ) (BJ) (GR) (NT) (A) (Q)"),
    "III":   ("M", "V",  "(ABDHPEJT) (CFLVMZOYQIRWUKXSG) (N)"),
    "IV":    ("M", "J",  "(AEPLIYWCOXMRFZBSTGJQNH) (DV) (KU)"),
    "V":     ("M", "Z",  "(AVOLDRWFIUQ) (BZKSMNHYC) (EGTJPX)"),
    "VI":    ("M", "ZM", "(AJQDVLEOZWIYTS) (CGMNHFUX) (BPRK)"),
    "VII":   ("M", "ZM", "(ANOUPFRIMBZTLWKSVEGCJYDHXQ)"),
    "VIII":  ("M", "ZM", "(AFLSETWUNDHOZVICQ) (BKJ) (GXY) (MPR)"),
    "Beta":  ("N", "",   "(ALBEVFCYODJWUGNMQTZSKPR) (HIX)"),
    "Gamma": ("N", "",   "(AFNIRLBSQWVXGUZDKMTPCOYJHE)"),
    "B":     ("R", "",   "(AE) (BN) (CK) (DQ) (FU) (GY) (HW) (IJ) (LO) (MP) (RX) (SZ) (TV)"),
    "C":     ("R", "",   "(AR) (BD) (CO) (EJ) (FN) (GT) (HK) (IV) (LM) (PW) (QZ) (SX) (UY)"),
}

NAVAL_SLOTS = 5
NAVAL_PAWLS = 3


def naval_config() -> str:
    """The Naval catalog written out as configuration-file text."""
    lines = [Alpha26, f"{NAVAL_SLOTS} {NAVAL_PAWLS}"]
    for name, (kind, notches, cycles) in NAVAL.items():
        lines.append(f"{name:<6}{kind + notches:<4}{cycles}")
    return "\n".join(lines) + "\n"


NAVAL_CONFIG = naval_config()
