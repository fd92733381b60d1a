from string_literal_finder.lexer import TokenKind, tokenize


def lexemes(content):
    return [t.lexeme for t in tokenize(content) if t.kind != TokenKind.EOF]


def test_basic_statement():
    tokens = tokenize("print('hi');")
    assert [t.kind for t in tokens] == [
        TokenKind.IDENTIFIER,
        TokenKind.PUNCTUATION,
        TokenKind.STRING,
        TokenKind.PUNCTUATION,
        TokenKind.PUNCTUATION,
        TokenKind.EOF,
    ]
    assert tokens[2].lexeme == "'hi'"
    assert (tokens[2].offset, tokens[2].end) == (6, 10)


def test_line_comment_attaches_to_next_token():
    content = "a; // NON-NLS\nb;"
    tokens = tokenize(content)
    b = tokens[2]
    assert b.lexeme == "b"
    (comment,) = b.preceding_comments
    assert comment.text == "// NON-NLS"
    assert content[comment.offset:comment.end] == "// NON-NLS"


def test_trailing_comment_rides_on_eof():
    tokens = tokenize("x; // NON-NLS")
    assert tokens[-1].kind == TokenKind.EOF
    assert tokens[-1].offset == len("x; // NON-NLS")
    assert tokens[-1].preceding_comments[0].text == "// NON-NLS"


def test_line_comment_excludes_carriage_return():
    tokens = tokenize("x; // done\r\ny;")
    assert tokens[2].preceding_comments[0].text == "// done"


def test_nested_block_comments():
    tokens = tokenize("a /* outer /* inner */ still */ b")
    assert [t.lexeme for t in tokens[:-1]] == ["a", "b"]
    assert tokens[1].preceding_comments[0].text == "/* outer /* inner */ still */"


def test_comment_markers_inside_strings_are_text():
    assert lexemes("s = '// not a comment';") == ["s", "=", "'// not a comment'", ";"]


def test_string_forms():
    assert lexemes(r"""a('it\'s') r'\d' '''x
y'''""") == ["a", "(", r"'it\'s'", ")", r"r'\d'", "'''x\ny'''"]


def test_interpolation_with_nested_quotes_and_braces():
    content = "'a ${m({'k': \"v\"})} b';"
    assert lexemes(content) == ["'a ${m({'k': \"v\"})} b'", ";"]


def test_numbers_and_identifiers():
    assert lexemes("x1 = 0xFF + 3.5e2;") == ["x1", "=", "0xFF", "+", "3.5e2", ";"]


def test_unterminated_string_stops_at_line_end():
    assert lexemes("'oops\nnext;") == ["'oops", "next", ";"]


def test_empty_input():
    (eof,) = tokenize("")
    assert eof.kind == TokenKind.EOF
    assert eof.preceding_comments == ()
