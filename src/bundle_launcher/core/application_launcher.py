# src/bundle_launcher/core/application_launcher.py
"""
Application Launcher - handles argument parsing and the launch sequence.

The sequence is strictly linear:

    START -> ARGS_OK -> VALIDATED -> ENV_CONFIGURED -> HANDED_OFF

Any step may fail, which moves the launcher to FAILED and yields the exit
code carried by the raised LauncherError.
"""

import argparse
import logging
import os
import sys
from enum import Enum
from typing import List, Optional

from .. import APP_NAME, __version__
from ..bundle import (
    Bundle,
    configure_library_path,
    hand_off,
    inspect_optional_components,
    validate_bundle,
)
from ..bundle.layout import MAX_PATH_LENGTH
from .config import SimpleConfigLoader
from .exceptions import (
    ConfigurationError,
    ExitCode,
    InvalidArgumentsError,
    LauncherError,
)
from .logging_setup import setup_logging

DESCRIPTION = "A professional application bundle launcher for Linux systems."

EPILOG = """\
Expected Bundle Structure:
  bundle_path/
  ├── exec/base          (Required executable)
  ├── library/           (Optional shared libraries)
  ├── resources/         (Optional resource files)
  ├── info.yaml          (Optional metadata)
  └── icon.png           (Optional application icon)

Exit Codes:
  0  Success
  1  Invalid arguments
  2  Bundle validation error
  3  Application execution error
  4  System error
"""


class LaunchState(Enum):
    START = "start"
    ARGS_OK = "args_ok"
    VALIDATED = "validated"
    ENV_CONFIGURED = "env_configured"
    HANDED_OFF = "handed_off"
    FAILED = "failed"


class _ParserExit(Exception):
    """Raised instead of sys.exit() when argparse handles --help or --version."""

    def __init__(self, status: int):
        super().__init__(status)
        self.status = status


class _LauncherArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports problems by raising instead of exiting."""

    def error(self, message):
        raise InvalidArgumentsError(message)

    def exit(self, status=0, message=None):
        if message:
            self._print_message(message, sys.stderr)
        raise _ParserExit(status)


class ApplicationLauncher:
    """
    Launches an application bundle by:
    1. Parsing command line arguments
    2. Validating the bundle layout
    3. Configuring the library search path
    4. Logging optional bundle components
    5. Replacing this process with the bundle executable
    """

    def __init__(self, argv: List[str], prog: Optional[str] = None):
        """
        Args:
            argv: Command line arguments (without script name)
            prog: Program name shown in usage text
        """
        self.argv = list(argv)
        self.prog = prog
        self.state = LaunchState.START
        self.logger = logging.getLogger(__name__)
        self.parser = self._build_parser()

    def run(self) -> int:
        """
        Run the launcher.

        Returns:
            Exit code. On POSIX a successful launch never returns here.
        """
        setup_logging()

        try:
            args = self._parse_arguments()
        except _ParserExit as e:
            return e.status
        except InvalidArgumentsError as e:
            self.logger.error(str(e))
            self.parser.print_help(sys.stderr)
            return self._fail(e.exit_code)

        try:
            config = self._load_config(args)
        except ConfigurationError as e:
            self.logger.error(f"Configuration error: {e}")
            return self._fail(e.exit_code)

        self.logger.info(f"Starting {APP_NAME} v{__version__}")
        self.logger.info(f"Target bundle: {args.bundle_path}")

        try:
            result = self._launch(Bundle(args.bundle_path), config)
        except LauncherError as e:
            result = self._fail(e.exit_code)
        except Exception as e:
            self.logger.error(f"Unexpected error: {e}", exc_info=True)
            result = self._fail(ExitCode.SYSTEM_ERROR)

        if self.state is LaunchState.FAILED:
            self.logger.error("Application launcher terminated unexpectedly")
        return result

    def _launch(self, bundle: Bundle, config: SimpleConfigLoader) -> int:
        validate_bundle(bundle)
        self.state = LaunchState.VALIDATED

        configure_library_path(bundle, config.get('launcher.library_path_variable'))
        self.state = LaunchState.ENV_CONFIGURED

        inspect_optional_components(bundle)

        status = hand_off(bundle)
        self.state = LaunchState.HANDED_OFF
        return status

    def _fail(self, exit_code: int) -> int:
        self.state = LaunchState.FAILED
        return int(exit_code)

    def _build_parser(self) -> argparse.ArgumentParser:
        parser = _LauncherArgumentParser(
            prog=self.prog,
            usage="%(prog)s [options] <bundle_path>",
            description=f"{APP_NAME} v{__version__}\n{DESCRIPTION}",
            epilog=EPILOG,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        parser.add_argument(
            "bundle_path", nargs="*",
            help="Path to the application bundle directory"
        )
        parser.add_argument("--config", "-c", type=str, help="Path to launcher YAML configuration file")
        parser.add_argument("--log-level", choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                            type=str.upper, help="Override the configured log level")
        parser.add_argument("--log-file", type=str, help="Also write log output to this file")
        parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
        return parser

    def _parse_arguments(self) -> argparse.Namespace:
        """Parse command line arguments; exactly one bundle path is accepted."""
        args = self.parser.parse_intermixed_args(self.argv)

        if len(args.bundle_path) > 1:
            raise InvalidArgumentsError("Too many arguments provided")
        if not args.bundle_path:
            raise InvalidArgumentsError("Missing required bundle path argument")

        args.bundle_path = args.bundle_path[0]
        if len(os.fsencode(args.bundle_path)) >= MAX_PATH_LENGTH:
            raise InvalidArgumentsError(f"Bundle path too long (max {MAX_PATH_LENGTH - 1} bytes)")

        self.state = LaunchState.ARGS_OK
        return args

    def _load_config(self, args: argparse.Namespace) -> SimpleConfigLoader:
        """Load the optional config file and re-apply logging with it."""
        if args.config:
            config = SimpleConfigLoader(args.config)
            self.logger.debug(f"Configuration loaded from: {args.config}")
        else:
            config = SimpleConfigLoader.empty()

        try:
            setup_logging(config, cmd_log_level=args.log_level, log_file=args.log_file)
        except OSError as e:
            log_file = args.log_file or config.get('logging.file')
            raise ConfigurationError(f"Unable to open log file '{log_file}': {e.strerror or e}") from e
        return config


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    return ApplicationLauncher(args, prog="bundle-launcher").run()
