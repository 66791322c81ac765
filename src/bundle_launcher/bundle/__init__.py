from .layout import Bundle
from .validator import validate_bundle
from .environment import configure_library_path, library_path_variable
from .inspector import ComponentReport, inspect_optional_components
from .handoff import hand_off

__all__ = [
    'Bundle',
    'validate_bundle',
    'configure_library_path',
    'library_path_variable',
    'ComponentReport',
    'inspect_optional_components',
    'hand_off',
]
