import logging

from string_literal_finder.diagnostics import CORRECTION, ERROR_CODE, DiagnosticAssembler
from string_literal_finder.edit_builder import EXTRACT_STRING_ID, EditBuilder
from string_literal_finder.fixes import FixSynthesizer
from string_literal_finder.issue import (
    APPLY_UNCONDITIONALLY,
    FILE_NOT_KNOWN_TO_EXIST,
    ErrorType,
    LinkedEditSuggestionKind,
    Severity,
)
from string_literal_finder.scanner import LiteralScanner

from builders import PRINT, TEXT, Source, apply_edits, hello_world, method, param

ARB_PATH = "/project/lib/l10n/app_en.arb"
ARB_TEXT = '{\n  "existing": "x"\n}\n'


def found_in(unit):
    return list(LiteralScanner().scan(unit))


def edits_for(change, path):
    return [e for file_edit in change.edits if file_edit.file == path for e in file_edit.edits]


def test_extraction_edits_apply_to_arb_and_source():
    src, unit, _ = hello_world()
    (literal,) = found_in(unit)
    fixes = FixSynthesizer(unit).synthesize(literal, ARB_PATH)

    assert [f.priority for f in fixes] == [10, 1]
    extract = fixes[0].change
    assert extract.id == EXTRACT_STRING_ID
    assert extract.message == "Extract string with name helloWorld"
    assert [e.file for e in extract.edits] == [ARB_PATH, unit.path]
    assert all(e.file_stamp == APPLY_UNCONDITIONALLY for e in extract.edits)

    arb = apply_edits(ARB_TEXT, edits_for(extract, ARB_PATH))
    assert arb == (
        '{\n'
        '  "helloWorld": "Hello world",\n'
        '  "@helloWorld": {},\n'
        '  "existing": "x"\n'
        '}\n'
    )
    source = apply_edits(src.content, edits_for(extract, unit.path))
    assert source == 'void main() {\n  print(loc.helloWorld);\n}\n'
    assert extract.selection.file == ARB_PATH
    assert extract.selection.offset == 2


def test_linked_positions_point_at_identifier_after_edits():
    src, unit, _ = hello_world()
    (literal,) = found_in(unit)
    extract = FixSynthesizer(unit).synthesize(literal, ARB_PATH)[0].change
    arb = apply_edits(ARB_TEXT, edits_for(extract, ARB_PATH))
    source = apply_edits(src.content, edits_for(extract, unit.path))
    texts = {ARB_PATH: arb, unit.path: source}

    (group,) = extract.linked_edit_groups
    assert group.length == len("helloWorld")
    assert [p.file for p in group.positions] == [ARB_PATH, ARB_PATH, unit.path]
    for position in group.positions:
        text = texts[position.file]
        assert text[position.offset:position.offset + group.length] == "helloWorld"
    assert [s.value for s in group.suggestions] == ["helloWorld", "helloWorld2"]
    assert all(s.kind == LinkedEditSuggestionKind.VARIABLE for s in group.suggestions)


def test_arb_value_is_json_escaped():
    lines = EditBuilder().arb_lines("sayHi", 'Say "hi"\nplease \\ now')
    assert lines[0] == '  "sayHi": "Say \\"hi\\"\\nplease \\\\ now",\n'
    assert lines[1] == '  "@sayHi": {},\n'


def test_arb_value_keeps_non_ascii_characters():
    (line, _) = EditBuilder().arb_lines("greeting", "Grüße")
    assert line == '  "greeting": "Grüße",\n'


def test_marker_fix_after_statement_terminator():
    src, unit, _ = hello_world()
    (literal,) = found_in(unit)
    marker = FixSynthesizer(unit).synthesize(literal)[-1]
    assert marker.priority == 1
    assert marker.change.message == "Add // NON-NLS"
    (file_edit,) = marker.change.edits
    assert file_edit.file == unit.path
    assert apply_edits(src.content, file_edit.edits) == (
        'void main() {\n  print("Hello world"); // NON-NLS\n}\n'
    )


def test_marker_after_last_terminator_on_line():
    src = Source("void f() {\n  print('a'); count++;\n}\n")
    literal = src.string("'a'")
    unit = src.unit(src.call("print('a')", PRINT, literal))
    (found,) = found_in(unit)
    synthesizer = FixSynthesizer(unit)
    assert synthesizer.marker_offset(found) == src.content.index("count++;") + len("count++;")


def test_marker_at_line_end_without_terminator():
    src = Source("final t = Text(\n  'Version',\n);\n")
    literal = src.string("'Version'")
    unit = src.unit(src.new("Text(\n  'Version',\n)", TEXT, method("Text", param("data")), literal))
    (found,) = found_in(unit)
    offset = FixSynthesizer(unit).marker_offset(found)
    assert offset == src.content.index("'Version',") + len("'Version',")
    marker = FixSynthesizer(unit).marker_fix(found)
    assert apply_edits(src.content, marker.change.edits[0].edits) == (
        "final t = Text(\n  'Version', // NON-NLS\n);\n"
    )


def test_marker_before_windows_line_break():
    src = Source("void f() {\r\n  print('a')\r\n}\r\n")
    literal = src.string("'a'")
    unit = src.unit(src.call("print('a')", PRINT, literal))
    (found,) = found_in(unit)
    assert FixSynthesizer(unit).marker_offset(found) == src.content.index("print('a')") + len("print('a')")


def test_marker_at_end_of_file_without_newline():
    src = Source("const title = 'Debug'")
    literal = src.string("'Debug'")
    unit = src.unit(src.node("title = 'Debug'", literal))
    (found,) = found_in(unit)
    assert FixSynthesizer(unit).marker_offset(found) == len(src.content)


def test_no_extraction_without_resource_file():
    _, unit, _ = hello_world()
    (literal,) = found_in(unit)
    fixes = FixSynthesizer(unit).synthesize(literal, None)
    assert [f.priority for f in fixes] == [1]


def test_no_extraction_without_static_value():
    src = Source("void f() {\n  print('Hi $name');\n}\n")
    literal = src.interpolation("'Hi $name'", src.node("name"))
    unit = src.unit(src.call("print('Hi $name')", PRINT, literal))
    (found,) = found_in(unit)
    fixes = FixSynthesizer(unit).synthesize(found, ARB_PATH)
    assert [f.priority for f in fixes] == [1]


def test_debug_mode_explains_missing_extraction(caplog):
    _, unit, _ = hello_world()
    (literal,) = found_in(unit)
    with caplog.at_level(logging.DEBUG, logger="string_literal_finder"):
        fixes = FixSynthesizer(unit, debug=True).synthesize(literal, None)
    assert [f.priority for f in fixes] == [2, 1]
    explanation = fixes[0].change
    assert explanation.message == (
        "Unable to extract string, resource file: not found / static value: available"
    )
    assert explanation.edits == []
    assert "No extraction for" in caplog.text


def test_debug_mode_with_interpolation_reports_missing_value():
    src = Source("void f() {\n  print('Hi $name');\n}\n")
    literal = src.interpolation("'Hi $name'", src.node("name"))
    unit = src.unit(src.call("print('Hi $name')", PRINT, literal))
    (found,) = found_in(unit)
    fixes = FixSynthesizer(unit, debug=True).synthesize(found, ARB_PATH)
    assert [f.priority for f in fixes] == [2, 1]
    assert fixes[0].change.message.endswith(f"resource file: {ARB_PATH} / static value: none")


def test_missing_source_file_uses_existence_guard():
    src, _, literal = hello_world()
    unit = src.unit(src.node("void main() {", src.call('print("Hello world")', PRINT, literal)),
                    exists=False)
    (found,) = found_in(unit)
    extract, marker = FixSynthesizer(unit).synthesize(found, ARB_PATH)
    stamps = {e.file: e.file_stamp for e in extract.change.edits}
    assert stamps == {ARB_PATH: APPLY_UNCONDITIONALLY, unit.path: FILE_NOT_KNOWN_TO_EXIST}
    assert marker.change.edits[0].file_stamp == FILE_NOT_KNOWN_TO_EXIST


def test_identifiers_unique_within_a_pass():
    _, unit, _ = hello_world()
    synthesizer = FixSynthesizer(unit)
    assert synthesizer.identifier_for("Hello world") == ("helloWorld", ["helloWorld", "helloWorld2"])
    assert synthesizer.identifier_for("Hello, world!") == ("helloWorld2", ["helloWorld2", "helloWorld3"])
    # same text maps to the key it already got
    assert synthesizer.identifier_for("Hello world")[0] == "helloWorld"
    assert synthesizer.identifier_for("Hello, world!")[0] == "helloWorld2"


def test_identifiers_are_per_pass():
    _, unit, _ = hello_world()
    FixSynthesizer(unit).identifier_for("Hello world")
    assert FixSynthesizer(unit).identifier_for("Hello, world!")[0] == "helloWorld"


def test_diagnostic_for_literal():
    _, unit, _ = hello_world()
    (literal,) = found_in(unit)
    fixes = FixSynthesizer(unit).synthesize(literal, ARB_PATH)
    result = DiagnosticAssembler(unit).assemble(literal, fixes)
    error = result.error
    assert error.severity == Severity.WARNING
    assert error.type == ErrorType.LINT
    assert error.code == ERROR_CODE == "found_string_literal"
    assert error.message == "Found string literal: Hello world"
    assert error.correction == CORRECTION
    assert "@NonNlsArg()" in error.correction
    assert "nonNls()" in error.correction
    assert "// NON-NLS" in error.correction
    assert error.has_fix
    assert (error.location.offset, error.location.length) == (literal.char_offset, literal.char_length)
    assert (error.location.start_line, error.location.start_column) == (2, 9)
    assert (error.location.end_line, error.location.end_column) == (2, 22)
    assert result.fixes == fixes


def test_diagnostic_message_uses_source_text_without_static_value():
    src = Source("void f() {\n  print('Hi $name');\n}\n")
    literal = src.interpolation("'Hi $name'", src.node("name"))
    unit = src.unit(src.call("print('Hi $name')", PRINT, literal))
    (found,) = found_in(unit)
    result = DiagnosticAssembler(unit).assemble(found, [])
    assert result.error.message == "Found string literal: 'Hi $name'"
    assert not result.error.has_fix


def test_adjacent_string_parts_get_extraction_fixes():
    src = Source("void f() {\n  print('Hello ' 'world');\n}\n")
    hello, world = src.string("'Hello '"), src.string("'world'")
    adjacent = src.adjacent(hello, world)
    unit = src.unit(src.call("print('Hello ' 'world')", PRINT, adjacent))
    synthesizer = FixSynthesizer(unit)
    found = found_in(unit)
    assert [f.node for f in found] == [adjacent, hello, world]
    whole, first, second = (synthesizer.synthesize(f, ARB_PATH) for f in found)
    # the concatenation as a whole has no static value
    assert [f.priority for f in whole] == [1]
    assert [f.priority for f in first] == [10, 1]
    assert [f.priority for f in second] == [10, 1]
    assert first[0].change.message == "Extract string with name hello"
    assert second[0].change.message == "Extract string with name world"
