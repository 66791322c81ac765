# src/bundle_launcher/bundle/inspector.py
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .layout import Bundle

logger = logging.getLogger(__name__)


@dataclass
class ComponentReport:
    """What the inspector saw in a bundle. Informational only."""
    has_metadata: bool = False
    has_icon: bool = False
    has_resources: bool = False
    metadata: Dict[str, Any] = field(default_factory=dict)


def load_metadata(metadata_file: Path) -> Optional[Dict[str, Any]]:
    """
    Parses info.yaml.

    Returns the document when it is a mapping, otherwise None. Problems are
    logged as warnings and never raised.
    """
    try:
        with open(metadata_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Unable to read metadata file {metadata_file}: {e}")
        return None
    except yaml.YAMLError as e:
        logger.warning(f"Metadata file is not valid YAML: {metadata_file}: {e}")
        return None

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Metadata file does not contain a mapping: {metadata_file}")
        return None
    return data


def inspect_optional_components(bundle: Bundle) -> ComponentReport:
    """Logs presence or absence of the optional bundle components."""
    report = ComponentReport()

    if bundle.metadata_file.is_file():
        report.has_metadata = True
        logger.info(f"Metadata file found: {bundle.metadata_file}")
        metadata = load_metadata(bundle.metadata_file)
        if metadata:
            report.metadata = metadata
            logger.info(f"Bundle metadata: name={metadata.get('name', 'unknown')}, "
                        f"version={metadata.get('version', 'unknown')}")
    else:
        logger.debug("Metadata file not present")

    if bundle.icon_file.is_file():
        report.has_icon = True
        logger.info(f"Icon file found: {bundle.icon_file}")
    else:
        logger.debug("Icon file not present")

    if bundle.resources_dir.is_dir():
        report.has_resources = True
        logger.info(f"Resources directory found: {bundle.resources_dir}")
    else:
        logger.debug("Resources directory not present")

    return report
