"""
Kontonummer skill – Pruefziffernpruefung deutscher Kontonummern.

Tools:
  kontonummer_check         – Kontonummer gegen ein Pruefziffer-Kennzeichen pruefen
  kontonummer_list_methods  – alle bekannten Kennzeichen mit Gewichtung auflisten
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from skills.kontonummer.dispatcher import (
    METHODS,
    Method,
    check_blz,
    format_mark,
    is_implemented,
    is_known_mark,
    parse_mark,
)
from skills.kontonummer.errors import CheckResult, KontonummerError
from skills.kontonummer.methods import (
    check_pattern_00,
    check_pattern_01,
    check_pattern_02,
    check_pattern_06,
    digit_sum,
)

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

__all__ = [
    "METHODS",
    "CheckResult",
    "KontonummerError",
    "Method",
    "check_blz",
    "check_pattern_00",
    "check_pattern_01",
    "check_pattern_02",
    "check_pattern_06",
    "digit_sum",
    "format_mark",
    "is_implemented",
    "is_known_mark",
    "parse_mark",
    "register_tools",
]


def register_tools(mcp: "FastMCP") -> None:
    """Register all Kontonummer tools with the given FastMCP instance."""
    from utils.logger import logger, mask_account_numbers

    # ------------------------------------------------------------------

    @mcp.tool()
    def kontonummer_check(mark: str, account_number: int) -> str:
        """
        Prüft die Prüfziffer einer deutschen Kontonummer.

        Args:
            mark:            Prüfziffer-Kennzeichen der Bankleitzahl, zweistellig (z.B. "06", "10").
            account_number:  Kontonummer ohne Leerzeichen (z.B. 94012341).
        """
        try:
            code = parse_mark(mark)
            result = check_blz(code, account_number)
        except (TypeError, ValueError) as exc:
            logger.warning("kontonummer_check: ungueltige Eingabe: %s", str(exc))
            return f"Fehler: {exc}"

        masked = mask_account_numbers(str(account_number))
        label = f"{masked} / Kennzeichen {format_mark(code)}"
        if result.valid:
            logger.info("%s: gueltig", label)
            return f"{label}: gueltig"

        logger.info("%s: %s", label, result.error.name)
        return f"{label}: ungueltig – {result.error.message}"

    # ------------------------------------------------------------------

    @mcp.tool()
    def kontonummer_list_methods() -> str:
        """Listet alle bekannten Prüfziffer-Kennzeichen mit Verfahren und Gewichtung."""
        lines = [f"{'KZ':<3} {'Verfahren':<20} {'Gewichtung':<28} Beschreibung"]
        lines.append("-" * 90)
        for code, method in sorted(METHODS.items()):
            weights = ", ".join(str(w) for w in method.weights) if method.weights else "-"
            status = "" if method.implemented else " (nicht implementiert)"
            lines.append(
                f"{format_mark(code):<3} {method.routine_name:<20} {weights:<28} "
                f"{method.description}{status}"
            )
        return "\n".join(lines)
