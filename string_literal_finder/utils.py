"""
Utility functions for the string literal finder.
"""

import logging
import re
import sys
from pathlib import PurePosixPath

# Words of a string: acronyms, capitalized or lowercase words and numbers.
_WORD = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")

# Used when a string has no ASCII letters or digits, or starts with a digit.
KEY_PREFIX = "text"

GENERATED_FILE_SUFFIXES = (".g.dart",)

LOGGER_NAME = "string_literal_finder"


def camel_case(text: str) -> str:
    """Turn arbitrary text into a lowerCamelCase identifier."""
    words = _WORD.findall(text)
    if not words:
        return KEY_PREFIX
    head, tail = words[0], words[1:]
    key = head.lower() + "".join(w[:1].upper() + w[1:].lower() for w in tail)
    if key[0].isdigit():
        key = KEY_PREFIX + key
    return key


def to_posix(path: str) -> str:
    return str(PurePosixPath(path.replace("\\", "/")))


def is_generated_file(path: str) -> bool:
    """Generated code never gets localized by hand."""
    return path.endswith(GENERATED_FILE_SUFFIXES)


_debug_handler = None


def setup_debug_logging() -> None:
    """Send everything the finder logs to stderr."""
    global _debug_handler
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(logging.DEBUG)
    if _debug_handler is not None:
        return
    _debug_handler = logging.StreamHandler(sys.stderr)
    _debug_handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    package_logger.addHandler(_debug_handler)
