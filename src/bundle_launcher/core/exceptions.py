# src/bundle_launcher/core/exceptions.py
from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes returned by the launcher."""
    SUCCESS = 0
    INVALID_ARGS = 1
    BUNDLE_ERROR = 2
    EXEC_ERROR = 3
    SYSTEM_ERROR = 4


class LauncherError(Exception):
    """Base class for exceptions in this application."""
    exit_code = ExitCode.SYSTEM_ERROR


class InvalidArgumentsError(LauncherError):
    """Exception raised for a malformed command line."""
    exit_code = ExitCode.INVALID_ARGS


class ConfigurationError(LauncherError):
    """Exception raised for errors in the configuration."""
    exit_code = ExitCode.INVALID_ARGS


class BundleError(LauncherError):
    """Exception raised when the bundle layout is not launchable."""
    exit_code = ExitCode.BUNDLE_ERROR


class BundleNotFoundError(BundleError):
    pass


class ExecutableNotFoundError(BundleError):
    pass


class ExecutableNotPermittedError(BundleError):
    pass


class ExecError(LauncherError):
    """Exception raised when the bundle executable could not be started."""
    exit_code = ExitCode.EXEC_ERROR


class SystemEnvironmentError(LauncherError):
    """Exception raised when the process environment could not be prepared."""
    exit_code = ExitCode.SYSTEM_ERROR
