"""
Root conftest: makes ``coin_catalog`` importable from a source checkout.
Shared fixtures live in tests/conftest.py.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))
