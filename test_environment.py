# test_environment.py
import os
import sys
from unittest import mock

import pytest

from bundle_launcher.bundle import Bundle, configure_library_path, library_path_variable
from bundle_launcher.bundle import environment
from bundle_launcher.bundle.layout import MAX_ENV_LENGTH
from bundle_launcher.core.exceptions import ExitCode, SystemEnvironmentError

VAR = "BUNDLE_LAUNCHER_TEST_LIBPATH"


class FailingEnviron(dict):
    """Environment mapping whose writes fail like a resource-starved putenv."""

    def __setitem__(self, key, value):
        raise OSError(12, "Cannot allocate memory")


def test_missing_library_dir_leaves_environment_alone(make_bundle, monkeypatch):
    root = make_bundle(library=False)
    monkeypatch.setenv(VAR, "/opt/existing")

    result = configure_library_path(Bundle(str(root)), VAR)

    assert result is None
    assert os.environ[VAR] == "/opt/existing"


def test_missing_library_dir_does_not_create_variable(make_bundle, monkeypatch):
    root = make_bundle(library=False)
    monkeypatch.delenv(VAR, raising=False)

    configure_library_path(Bundle(str(root)), VAR)

    assert VAR not in os.environ


def test_library_dir_is_prepended_to_existing_value(make_bundle, monkeypatch):
    root = make_bundle(library=True)
    prior = "/usr/lib/odd path::/opt/lib"
    monkeypatch.setenv(VAR, prior)

    result = configure_library_path(Bundle(str(root)), VAR)

    expected = f"{root / 'library'}{os.pathsep}{prior}"
    assert result == expected
    assert os.environ[VAR] == expected
    assert os.environ[VAR].endswith(prior)


def test_library_dir_alone_when_variable_unset(make_bundle, monkeypatch):
    root = make_bundle(library=True)
    monkeypatch.delenv(VAR, raising=False)

    configure_library_path(Bundle(str(root)), VAR)

    assert os.environ[VAR] == str(root / "library")


def test_library_dir_alone_when_variable_empty(make_bundle, monkeypatch):
    root = make_bundle(library=True)
    monkeypatch.setenv(VAR, "")

    configure_library_path(Bundle(str(root)), VAR)

    assert os.environ[VAR] == str(root / "library")


def test_overlong_value_is_a_system_error(make_bundle, monkeypatch):
    root = make_bundle(library=True)
    prior = "x" * MAX_ENV_LENGTH
    monkeypatch.setenv(VAR, prior)

    with pytest.raises(SystemEnvironmentError) as excinfo:
        configure_library_path(Bundle(str(root)), VAR)

    assert excinfo.value.exit_code == ExitCode.SYSTEM_ERROR
    assert "exceed maximum length" in str(excinfo.value)
    assert os.environ[VAR] == prior


def test_value_at_the_limit_is_accepted(make_bundle, monkeypatch):
    root = make_bundle(library=True)
    library = str(root / "library")
    # library + separator + prior + NUL fills the buffer exactly
    prior = "y" * (MAX_ENV_LENGTH - len(library) - 2)
    monkeypatch.setenv(VAR, prior)

    result = configure_library_path(Bundle(str(root)), VAR)

    assert len(result) == MAX_ENV_LENGTH - 1


def test_failed_mutation_is_a_system_error(make_bundle, monkeypatch):
    root = make_bundle(library=True)
    monkeypatch.delenv(VAR, raising=False)

    with mock.patch.object(environment.os, "environ", FailingEnviron(os.environ)):
        with pytest.raises(SystemEnvironmentError) as excinfo:
            configure_library_path(Bundle(str(root)), VAR)

    assert "Failed to set" in str(excinfo.value)


def test_default_variable_follows_platform(monkeypatch):
    monkeypatch.setattr(environment.sys, "platform", "linux")
    assert library_path_variable() == "LD_LIBRARY_PATH"

    monkeypatch.setattr(environment.sys, "platform", "darwin")
    assert library_path_variable() == "DYLD_LIBRARY_PATH"


def test_build_library_path_keeps_prior_verbatim():
    assert environment.build_library_path("/b/library", None) == "/b/library"
    assert environment.build_library_path("/b/library", "") == "/b/library"
    assert environment.build_library_path("/b/library", " a :b ") == f"/b/library{os.pathsep} a :b "


@pytest.mark.skipif(sys.getfilesystemencoding().lower().replace("-", "") != "utf8",
                    reason="needs a UTF-8 filesystem encoding")
def test_limit_counts_encoded_bytes(make_bundle, monkeypatch):
    root = make_bundle(library=True)
    # Half the limit in characters, the full limit in UTF-8 bytes
    prior = "é" * (MAX_ENV_LENGTH // 2)
    monkeypatch.setenv(VAR, prior)

    with pytest.raises(SystemEnvironmentError):
        configure_library_path(Bundle(str(root)), VAR)

    assert os.environ[VAR] == prior
