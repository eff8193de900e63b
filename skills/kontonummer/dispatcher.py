"""
Mark -> check digit method dispatch.

Each bank routing code (BLZ) names one Pruefziffer-Kennzeichen ("mark"). The
Bundesbank writes marks as two characters ("00", "06", "A2"); numerically a
mark is the hex reading of those characters, so "10" is 0x10.

Most used methods in the BLZ directory (count | mark):
    2534|00  2186|88  1651|06  1463|63  1004|10
     890|32   796|09   746|13   680|28   607|01
     527|76   503|20   496|34   225|38   213|99
     129|61   122|A2   106|03    58|C7    55|68
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional, Tuple

from skills.kontonummer.errors import CheckResult, KontonummerError
from skills.kontonummer.methods import (
    Weights,
    check_pattern_00,
    check_pattern_01,
    check_pattern_02,
    check_pattern_06,
)

Routine = Callable[[int, Weights], CheckResult]

_MARK_RE = re.compile(r"^[0-9A-F]{1,2}$")

# Mark 08: account numbers from this value on are not checked
THRESHOLD_08 = 60000


def _check_threshold_08(account_number: int, weights: Weights) -> CheckResult:
    if account_number >= THRESHOLD_08:
        return CheckResult.ok()
    return check_pattern_00(account_number, weights)


def _check_none(account_number: int, weights: Weights) -> CheckResult:
    return CheckResult.ok()


@dataclass(frozen=True)
class Method:
    routine: Optional[Routine]
    weights: Optional[Tuple[int, ...]]
    description: str

    @property
    def implemented(self) -> bool:
        return self.routine is not None

    @property
    def routine_name(self) -> str:
        if self.routine is None:
            return "-"
        return self.routine.__name__.lstrip("_")


_W_2_7 = (2, 3, 4, 5, 6, 7)
_W_2_9 = (2, 3, 4, 5, 6, 7, 8, 9)
_W_2_10 = (2, 3, 4, 5, 6, 7, 8, 9, 10)

_METHODS: Dict[int, Method] = {
    0x00: Method(check_pattern_00, (2, 1), "Modulus 10, Quersumme der Produkte"),
    0x01: Method(check_pattern_01, (3, 7, 1), "Modulus 10"),
    0x02: Method(check_pattern_02, _W_2_9, "Modulus 11, Rest 10 nicht pruefbar"),
    0x03: Method(check_pattern_01, (2, 1), "Modulus 10"),
    0x04: Method(check_pattern_02, _W_2_7, "Modulus 11, Rest 10 nicht pruefbar"),
    0x05: Method(check_pattern_01, (7, 3, 1), "Modulus 10"),
    0x06: Method(check_pattern_06, _W_2_7, "Modulus 11, Rest 10 ergibt Pruefziffer 0"),
    0x07: Method(check_pattern_02, _W_2_10, "Modulus 11, Rest 10 nicht pruefbar"),
    0x08: Method(
        _check_threshold_08,
        (2, 1),
        f"wie 00, ab Kontonummer {THRESHOLD_08} keine Pruefung",
    ),
    0x09: Method(_check_none, None, "keine Pruefziffernberechnung"),
    0x10: Method(check_pattern_06, _W_2_10, "Modulus 11, Rest 10 ergibt Pruefziffer 0"),
    # TODO: 11 needs its own routine (modulus 11, expected 10 becomes 9)
    0x11: Method(None, _W_2_10, "Modulus 11, Rest 10 ergibt Pruefziffer 9"),
}

METHODS: Mapping[int, Method] = MappingProxyType(_METHODS)


def check_blz(mark: int, account_number: int) -> CheckResult:
    """
    Validate the check digit of ``account_number`` with the method named by ``mark``.

    Data-dependent failures are returned as ``CheckResult`` with an error kind.
    Only programming errors raise (non-int arguments, negative account numbers).
    """
    if isinstance(account_number, bool) or not isinstance(account_number, int):
        raise TypeError(f"account_number must be int, got {type(account_number).__name__}")
    if account_number < 0:
        raise ValueError(f"account_number must not be negative, got {account_number}")

    method = _METHODS.get(mark)
    if method is None:
        return CheckResult.fail(KontonummerError.UNKNOWN_MARK)
    if method.routine is None:
        return CheckResult.fail(KontonummerError.NOT_IMPLEMENTED)
    return method.routine(account_number, method.weights)


def is_known_mark(mark: int) -> bool:
    return mark in _METHODS


def is_implemented(mark: int) -> bool:
    method = _METHODS.get(mark)
    return method is not None and method.implemented


def parse_mark(text: str) -> int:
    """Read a Bundesbank mark such as "06" or "A2" into its numeric value."""
    cleaned = text.strip().upper()
    if not _MARK_RE.match(cleaned):
        raise ValueError(f"Ungueltiges Kennzeichen: {text!r}")
    return int(cleaned, 16)


def format_mark(mark: int) -> str:
    if not 0 <= mark <= 0xFF:
        raise ValueError(f"Kennzeichen ausserhalb 00..FF: {mark}")
    return f"{mark:02X}"
