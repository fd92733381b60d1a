import logging

import pytest

from string_literal_finder.elements import NominalType
from string_literal_finder.type_matcher import (
    DEFAULT_IGNORE_SET,
    IgnoreSet,
    TypeChecker,
    is_logging_facility,
    matches,
)

from builders import ASSET_IMAGE, LOGGER, STRING


def test_from_url_splits_library_and_name():
    checker = TypeChecker.from_url("package:logging/src/logger.dart#Logger")
    assert checker.library == "package:logging/src/logger.dart"
    assert checker.name == "Logger"
    assert checker.url == "package:logging/src/logger.dart#Logger"


def test_from_url_requires_type_name():
    with pytest.raises(ValueError):
        TypeChecker.from_url("package:logging/src/logger.dart")


def test_same_name_from_other_library_does_not_match():
    other_logger = NominalType("Logger", "package:my_app/logger.dart")
    assert not is_logging_facility(other_logger)
    assert is_logging_facility(LOGGER)


def test_transitive_subtype_matches():
    base = NominalType("BaseLogger", "package:app/a.dart", (LOGGER,))
    derived = NominalType("FileLogger", "package:app/b.dart", (STRING, base))
    assert is_logging_facility(derived)


def test_repeated_supertypes_are_visited_once():
    shared = NominalType("Shared", "package:app/shared.dart")
    diamond = NominalType("Leaf", "package:app/leaf.dart", (shared, NominalType("Other", "x", (shared,))))
    assert not is_logging_facility(diamond)


def test_unresolved_type_is_not_matched(caplog):
    with caplog.at_level(logging.WARNING, logger="string_literal_finder"):
        assert not matches(DEFAULT_IGNORE_SET, None)
    assert "unresolved type" in caplog.text


def test_default_ignore_set():
    route_settings = NominalType("RouteSettings", "package:flutter/src/widgets/navigator.dart")
    assert matches(DEFAULT_IGNORE_SET, ASSET_IMAGE)
    assert matches(DEFAULT_IGNORE_SET, route_settings)
    assert matches(DEFAULT_IGNORE_SET, LOGGER)
    assert not matches(DEFAULT_IGNORE_SET, STRING)


def test_custom_ignore_set():
    ignore_set = IgnoreSet([TypeChecker("dart:core", "String")])
    assert ignore_set.matches(STRING)
    assert not ignore_set.matches(ASSET_IMAGE)


def test_annotation_lookup():
    checker = TypeChecker("package:a/a.dart", "Marker")
    assert checker.has_annotation_of([STRING, NominalType("Marker", "package:a/a.dart")])
    assert not checker.has_annotation_of([])
