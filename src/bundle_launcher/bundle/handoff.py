# src/bundle_launcher/bundle/handoff.py
import logging
import os
import subprocess

from ..core.exceptions import ExecError
from .layout import Bundle

logger = logging.getLogger(__name__)


def supports_exec() -> bool:
    """True where the process image can be replaced in place."""
    return os.name == 'posix'


def hand_off(bundle: Bundle) -> int:
    """
    Starts the bundle executable in place of this process.

    The executable receives only its own path as argv and inherits
    os.environ as it is now, including any library path set earlier.
    On POSIX this never returns on success. Elsewhere the executable runs
    as a child process and its exit status is returned.

    Raises:
        ExecError: The executable could not be started
    """
    exec_path = str(bundle.executable)
    argv = [exec_path]

    logger.info(f"Launching application: {exec_path}")
    logger.debug(f"Working directory: {os.getcwd()}")

    if not supports_exec():
        return _spawn_and_wait(exec_path, argv)

    for handler in logging.getLogger().handlers:
        handler.flush()

    try:
        os.execve(exec_path, argv, os.environ)
    except OSError as e:
        message = f"Failed to execute application: {e.strerror or e}"
        logger.error(message)
        raise ExecError(message) from e

    return 0  # unreachable: execve only returns by raising


def _spawn_and_wait(exec_path: str, argv) -> int:
    logger.debug("Process replacement unavailable; running application as a child process")
    try:
        completed = subprocess.run(argv, executable=exec_path, env=os.environ.copy())
    except OSError as e:
        message = f"Failed to execute application: {e.strerror or e}"
        logger.error(message)
        raise ExecError(message) from e

    logger.info(f"Application exited with status {completed.returncode}")
    return completed.returncode
