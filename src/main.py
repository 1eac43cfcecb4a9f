"""Script de ejecución.

Por qué existe:
- Es el entrypoint del script de consola `fe-scaffold`.
- Permite ejecutar la CLI con `python -m main` durante desarrollo.
"""

from __future__ import annotations

import sys

# Workaround for UnicodeEncodeError on Windows terminals (cp1252 vs utf-8):
# the CLI prints ✔ ✗ ⚠ and emoji markers.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
