# src/bundle_launcher/bundle/layout.py
"""
Bundle directory layout.

A bundle is a directory with a fixed set of sub-paths::

    <bundle>/
        exec/base      required executable
        library/       optional shared libraries
        resources/     optional resource files
        info.yaml      optional metadata
        icon.png       optional application icon
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

EXEC_PATH = Path("exec") / "base"
LIB_PATH = Path("library")
RES_PATH = Path("resources")
METADATA_PATH = Path("info.yaml")
ICON_PATH = Path("icon.png")

MAX_PATH_LENGTH = 4096
MAX_ENV_LENGTH = 4096


@dataclass(frozen=True)
class Bundle:
    """An application bundle on disk, identified by the path the caller gave."""
    path: str
    root: Path = field(init=False)

    def __post_init__(self):
        # abspath keeps symlinks in place, so the bundle root is what the caller named
        object.__setattr__(self, 'root', Path(os.path.abspath(self.path)))

    @property
    def executable(self) -> Path:
        return self.root / EXEC_PATH

    @property
    def library_dir(self) -> Path:
        return self.root / LIB_PATH

    @property
    def resources_dir(self) -> Path:
        return self.root / RES_PATH

    @property
    def metadata_file(self) -> Path:
        return self.root / METADATA_PATH

    @property
    def icon_file(self) -> Path:
        return self.root / ICON_PATH
