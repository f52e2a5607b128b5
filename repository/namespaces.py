# repository/namespaces.py
from typing import Final

ROOT: Final[str] = "dinocam"

MOTIONS: Final[str] = f"{ROOT}:motions"  # provider motion catalogue snapshot
