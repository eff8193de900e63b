"""Error kinds and outcome type for account number check digit validation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class KontonummerError(IntEnum):
    UNKNOWN_MARK = 0x01
    INVALID_CHECKSUM = 0x02
    # see routine 02
    CALCULATED_CHECKSUM_NOT_USABLE = 0x03
    NOT_IMPLEMENTED = 0x04

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    KontonummerError.UNKNOWN_MARK: "Unbekanntes Pruefziffer-Kennzeichen.",
    KontonummerError.INVALID_CHECKSUM: "Pruefziffer ungueltig.",
    KontonummerError.CALCULATED_CHECKSUM_NOT_USABLE: (
        "Berechnete Pruefziffer nicht verwendbar (Kontonummer nicht pruefbar)."
    ),
    KontonummerError.NOT_IMPLEMENTED: "Pruefziffermethode noch nicht implementiert.",
}


@dataclass(frozen=True)
class CheckResult:
    valid: bool
    error: Optional[KontonummerError] = None

    @classmethod
    def ok(cls) -> "CheckResult":
        return _OK

    @classmethod
    def fail(cls, error: KontonummerError) -> "CheckResult":
        return cls(False, error)

    def __bool__(self) -> bool:
        return self.valid


_OK = CheckResult(True)
