# src/bundle_launcher/bundle/environment.py
import logging
import os
import sys
from typing import Optional

from ..core.exceptions import SystemEnvironmentError
from .layout import MAX_ENV_LENGTH, Bundle

logger = logging.getLogger(__name__)


def library_path_variable() -> str:
    """Returns the dynamic linker's search-path variable for this platform."""
    if sys.platform == 'darwin':
        return 'DYLD_LIBRARY_PATH'
    return 'LD_LIBRARY_PATH'


def build_library_path(library_dir: str, current_value: Optional[str]) -> str:
    """Prepends library_dir to current_value, keeping current_value verbatim."""
    if current_value:
        return f"{library_dir}{os.pathsep}{current_value}"
    return library_dir


def configure_library_path(bundle: Bundle, variable: Optional[str] = None) -> Optional[str]:
    """
    Prepends the bundle's library directory to the library search path.

    A bundle without a library directory is valid; the environment is then
    left untouched.

    Args:
        bundle: The validated bundle
        variable: Environment variable to update, defaults to the platform's

    Returns:
        The new variable value, or None when the bundle has no library directory

    Raises:
        SystemEnvironmentError: The value is too long or could not be set
    """
    variable = variable or library_path_variable()
    library_dir = bundle.library_dir

    if not library_dir.is_dir():
        logger.warning(f"Library directory not found: {library_dir}")
        return None

    new_value = build_library_path(str(library_dir), os.environ.get(variable))

    # The limit is in encoded bytes, counting the terminating NUL handed to exec
    if len(os.fsencode(new_value)) + 1 > MAX_ENV_LENGTH:
        message = f"{variable} would exceed maximum length ({MAX_ENV_LENGTH})"
        logger.error(message)
        raise SystemEnvironmentError(message)

    try:
        os.environ[variable] = new_value
    except (OSError, ValueError) as e:
        message = f"Failed to set {variable}: {e}"
        logger.error(message)
        raise SystemEnvironmentError(message) from e

    logger.info(f"Library path configured: {library_dir}")
    logger.debug(f"Full {variable}: {new_value}")
    return new_value
