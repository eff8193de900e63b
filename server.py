"""
kontoMCP – MCP Server für die Prüfziffernprüfung deutscher Kontonummern.

Startet einen FastMCP Server (stdio) und registriert alle Skills.

Skills:
  kontonummer  – Prüfzifferberechnungsmethoden der Deutschen Bundesbank

Verwendung:
  python server.py                        # startet den MCP Server
  claude mcp add kontoMCP -- python /pfad/zu/server.py

Konfiguration:
  Kopiere .env.example zu .env und passe die Werte bei Bedarf an.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

# .env aus dem Projektverzeichnis laden (vor allen Skill-Imports)
load_dotenv(Path(__file__).parent / ".env", override=False)

mcp = FastMCP(
    "kontoMCP",
    instructions=(
        "MCP Server zur Prüfziffernprüfung deutscher Kontonummern. "
        "Verfügbare Skills: kontonummer (Prüfung anhand des Prüfziffer-Kennzeichens "
        "der Bankleitzahl). Kennzeichen werden zweistellig angegeben, z.B. \"06\"."
    ),
)

# ── Skills registrieren ────────────────────────────────────────────────
from skills.kontonummer import register_tools as _kontonummer  # noqa: E402

_kontonummer(mcp)

# ── Einstiegspunkt ─────────────────────────────────────────────────────
if __name__ == "__main__":
    mcp.run()
