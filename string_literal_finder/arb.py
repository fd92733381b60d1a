"""
Locates the template ARB file through the project's `l10n.yaml`.
"""

import logging
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

L10N_FILE = "l10n.yaml"
DEFAULT_ARB_DIR = "lib/l10n"
DEFAULT_TEMPLATE_ARB_FILE = "app_en.arb"


def find_arb_file(root: Path) -> Optional[Path]:
    """Path of the template ARB file, or None when it cannot be found."""
    l10n_yaml = Path(root) / L10N_FILE
    if not l10n_yaml.is_file():
        logger.warning("Unable to find %s in %s", L10N_FILE, root)
        return None
    try:
        document = yaml.safe_load(l10n_yaml.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Unable to read %s: %s", l10n_yaml, e)
        return None
    if not isinstance(document, dict):
        logger.warning("Ignoring %s, expected a mapping", l10n_yaml)
        document = {}

    arb_dir = document.get("arb-dir") or DEFAULT_ARB_DIR
    arb_name = document.get("template-arb-file") or DEFAULT_TEMPLATE_ARB_FILE
    logger.debug("l10n settings: arb-dir=%s template-arb-file=%s", arb_dir, arb_name)
    arb_file = Path(root) / str(arb_dir) / str(arb_name)
    if not arb_file.is_file():
        logger.warning("Configured arb file does not exist: %s", arb_file)
        return None
    return arb_file
