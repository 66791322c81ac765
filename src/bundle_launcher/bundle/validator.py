# src/bundle_launcher/bundle/validator.py
import logging
import os
from pathlib import Path

from ..core.exceptions import (
    BundleNotFoundError,
    ExecutableNotFoundError,
    ExecutableNotPermittedError,
)
from .layout import Bundle

logger = logging.getLogger(__name__)


def is_executable(path: Path) -> bool:
    """Checks execute permission for the effective user where the platform allows it."""
    if os.access in os.supports_effective_ids:
        return os.access(path, os.X_OK, effective_ids=True)
    return os.access(path, os.X_OK)


def validate_bundle(bundle: Bundle) -> None:
    """
    Confirms the bundle can be launched.

    Args:
        bundle: The bundle to check

    Raises:
        BundleNotFoundError: The bundle path is not an existing directory
        ExecutableNotFoundError: exec/base is missing or not a regular file
        ExecutableNotPermittedError: exec/base is not executable
    """
    # An empty path would otherwise resolve to the working directory
    if not bundle.path or not bundle.root.is_dir():
        message = f"Bundle directory not found: {bundle.path}"
        logger.error(message)
        raise BundleNotFoundError(message)

    executable = bundle.executable
    if not executable.is_file():
        message = f"Required executable not found: {executable}"
        logger.error(message)
        raise ExecutableNotFoundError(message)

    if not is_executable(executable):
        message = f"Executable lacks execute permissions: {executable}"
        logger.error(message)
        raise ExecutableNotPermittedError(message)

    logger.info(f"Bundle validation successful: {bundle.path}")
