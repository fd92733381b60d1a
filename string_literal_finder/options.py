"""
Project options read from `analysis_options.yaml`.

    string_literal_finder:
      exclude_globs:
        - 'lib/generated/**'
      debug: false
"""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Tuple

import yaml

from .exceptions import ConfigurationError
from .utils import to_posix

logger = logging.getLogger(__name__)

OPTIONS_FILE = "analysis_options.yaml"
OPTIONS_SECTION = "string_literal_finder"


@lru_cache(maxsize=256)
def compile_glob(pattern: str) -> re.Pattern:
    """Regex for a path glob. `*`, `?` and `[...]` stay within one path
    segment; only `**` crosses `/`. `{a,b}` picks one of the alternatives.
    """
    parts = []
    depth = 0
    i = 0
    while i < len(pattern):
        ch = pattern[i]
        if pattern.startswith("**/", i):
            # also matches zero directories
            parts.append("(?:.*/)?")
            i += 3
            continue
        if pattern.startswith("**", i):
            parts.append(".*")
            i += 2
            continue
        if ch == "*":
            parts.append("[^/]*")
        elif ch == "?":
            parts.append("[^/]")
        elif ch == "[":
            end = pattern.find("]", i + 2)
            if end == -1:
                raise ConfigurationError(f"Unclosed '[' in glob {pattern!r}")
            body = pattern[i + 1:end].replace("\\", "\\\\")
            if body[0] in "!^":
                body = "^/" + body[1:]
            parts.append("[" + body + "]")
            i = end + 1
            continue
        elif ch == "{":
            depth += 1
            parts.append("(?:")
        elif ch == "}" and depth:
            depth -= 1
            parts.append(")")
        elif ch == "," and depth:
            parts.append("|")
        else:
            parts.append(re.escape(ch))
        i += 1
    if depth:
        raise ConfigurationError(f"Unclosed '{{' in glob {pattern!r}")
    return re.compile("".join(parts))


@dataclass(frozen=True)
class AnalysisOptions:
    """Exclusions and debug flag for one analysis root."""
    exclude_globs: Tuple[str, ...] = ()
    debug: bool = False

    @classmethod
    def load_from_yaml(cls, source: str) -> "AnalysisOptions":
        try:
            document = yaml.safe_load(source)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML: {e}") from e
        if document is None:
            return cls()
        if not isinstance(document, dict):
            raise ConfigurationError("Options document must be a mapping")

        options = document.get(OPTIONS_SECTION) or {}
        if not isinstance(options, dict):
            raise ConfigurationError(f"'{OPTIONS_SECTION}' must be a mapping")
        globs = options.get("exclude_globs") or []
        if not isinstance(globs, list) or not all(isinstance(g, str) for g in globs):
            raise ConfigurationError("'exclude_globs' must be a list of strings")
        for pattern in globs:
            compile_glob(pattern)
        debug = options.get("debug", False)
        if not isinstance(debug, bool):
            raise ConfigurationError("'debug' must be true or false")
        return cls(exclude_globs=tuple(globs), debug=debug)

    def is_excluded(self, path: str) -> bool:
        """Match a root-relative path against the exclusion globs."""
        posix = to_posix(path)
        return any(compile_glob(p).fullmatch(posix) for p in self.exclude_globs)


def load_options(root: Path) -> AnalysisOptions:
    """Options for `root`; defaults when the file is missing or broken."""
    options_path = Path(root) / OPTIONS_FILE
    if not options_path.is_file():
        logger.warning("Unable to resolve options file %s", options_path)
        return AnalysisOptions()
    try:
        return AnalysisOptions.load_from_yaml(options_path.read_text(encoding="utf-8"))
    except (OSError, ConfigurationError) as e:
        logger.warning("Ignoring options file %s: %s", options_path, e)
        return AnalysisOptions()
