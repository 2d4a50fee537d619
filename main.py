"""Atajo para desarrollo: `python main.py posts build.json`.

Sin `pip install -e .` los paquetes de `src/` no están en el path; aquí se
añaden antes de cargar la CLI. Instalado, usa el script `wpcontent`.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def main() -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    # Rich imprime "•"; las consolas cp1252 de Windows no lo codifican.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
