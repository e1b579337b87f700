# tests/conftest.py
# Put the source root (Python/) on sys.path so `import reduct` and
# `import run_all_tests` work without installing the package.

import sys
import pathlib

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = str(ROOT / "Python")

if SRC not in sys.path:
    sys.path.insert(0, SRC)

from reduct.runtime import evaluator  # noqa: E402
from reduct.parser import main as parser_main  # noqa: E402


@pytest.fixture(autouse=True)
def quiet_debug(monkeypatch):
    # Tests that switch debug on get the flags restored afterwards.
    monkeypatch.setattr(evaluator, "DEBUG_EVAL", False)
    monkeypatch.setattr(parser_main, "DEBUG_READ", False)
