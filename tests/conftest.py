# File: tests/conftest.py

import os
import sys
import logging
from pathlib import Path

import pytest

# 1. Add project root to path
sys.path.append(str(Path(__file__).resolve().parent.parent))

@pytest.fixture
def sample_tree(tmp_path):
    """
    root/
      a.txt      "hello"
      sub/
        b.txt    "world"
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_bytes(b"hello")

    sub = root / "sub"
    sub.mkdir()
    (sub / "b.txt").write_bytes(b"world")

    return root


@pytest.fixture
def deep_tree(tmp_path):
    """
    A wider tree with nested folders, an empty folder and odd names.
    """
    root = tmp_path / "evidence"
    root.mkdir()

    (root / "report.pdf").write_bytes(b"%PDF-fake")
    (root / ".hidden").write_text("dotfile")
    (root / "no_extension").write_text("plain")

    case = root / "case_alpha"
    case.mkdir()
    (case / "notes.txt").write_text("Valid evidence")
    (case / "archive.tar.gz").write_bytes(b"\x1f\x8b" + b"\x00" * 64)

    nested = case / "photos" / "2024"
    nested.mkdir(parents=True)
    (nested / "img_001.jpg").write_bytes(os.urandom(4096))

    (root / "empty_folder").mkdir()

    return root


@pytest.fixture
def reset_console_logging():
    """
    CLI tests install a console handler bound to the runner's stream.
    Drop it afterwards so later tests don't log into a closed stream.
    """
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == "treescan-console":
            root.removeHandler(handler)
