"""Pytest configuration.

Puts src/ on sys.path so the test modules can import bundle_launcher without
an install, and provides a factory for bundle directories.
"""

import logging
import os
import sys
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parent / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

EXECUTABLE_SCRIPT = "#!/bin/sh\nexit 0\n"


@pytest.fixture
def make_bundle(tmp_path):
    """Builds a bundle directory under tmp_path and returns its root."""

    def _make(name="app", executable=True, exec_mode=0o755, script=EXECUTABLE_SCRIPT,
              library=False, resources=False, metadata=None, icon=False):
        root = tmp_path / name
        root.mkdir()
        if executable:
            exec_dir = root / "exec"
            exec_dir.mkdir()
            exe = exec_dir / "base"
            exe.write_text(script)
            os.chmod(exe, exec_mode)
        if library:
            (root / "library").mkdir()
        if resources:
            (root / "resources").mkdir()
        if metadata is not None:
            (root / "info.yaml").write_text(metadata)
        if icon:
            (root / "icon.png").write_bytes(b"\x89PNG\r\n\x1a\n")
        return root

    return _make


@pytest.fixture(autouse=True)
def _reset_launcher_logging():
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        if getattr(handler, "_bundle_launcher_handler", False):
            root_logger.removeHandler(handler)
            handler.close()
