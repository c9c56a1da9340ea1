"""`python -m pokeview [browse|show|doctor] ...`: misma CLI que el script `pokeview`."""

from __future__ import annotations

import sys

from pokeview.cli.main import run

if __name__ == "__main__":
    # La tarjeta imprime ★ y nombres con acentos; cp1252 en Windows no los codifica.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    run()
