# conftest.py
import sys
from pathlib import Path

# project root = directory holding pyproject.toml
ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"

if SRC.exists() and str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))
