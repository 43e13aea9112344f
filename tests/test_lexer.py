from termiphone.core.lexer import join_tokens, split_first_token, tokenize


def test_empty_input_has_no_tokens() -> None:
    assert tokenize("") == []
    assert tokenize("   \t ") == []


def test_double_quoted_span_is_one_token() -> None:
    assert tokenize('call -u "John Doe"') == ["call", "-u", "John Doe"]


def test_single_quoted_span_is_one_token() -> None:
    assert tokenize("sms -t 'see you soon'") == ["sms", "-t", "see you soon"]


def test_whitespace_runs_collapse() -> None:
    assert tokenize("a  b") == ["a", "b"]
    assert tokenize("  a\t\tb\n c  ") == ["a", "b", "c"]


def test_empty_quoted_token_is_preserved() -> None:
    assert tokenize('echo ""') == ["echo", ""]


def test_unterminated_quote_reads_to_end() -> None:
    assert tokenize('echo "hello world') == ["echo", "hello world"]


def test_other_quote_kind_is_literal_inside_span() -> None:
    assert tokenize("say \"it's fine\"") == ["say", "it's fine"]


def test_quote_inside_word_is_ordinary() -> None:
    assert tokenize('a=b"c d') == ['a=b"c', "d"]


def test_no_escape_processing() -> None:
    assert tokenize(r'echo "a\"b"') == ["echo", "a\\", 'b"']


def test_rejoined_tokens_match_normalized_line() -> None:
    line = "  help   me  now "
    assert " ".join(tokenize(line)) == "help me now"


def test_join_tokens_quotes_whitespace_and_empty() -> None:
    tokens = ["call", "-u", "John Doe", ""]
    assert tokenize(join_tokens(tokens)) == tokens


def test_split_first_token_keeps_rest_verbatim() -> None:
    assert split_first_token('alias greet="echo  hi"') == ("alias", 'greet="echo  hi"')
    assert split_first_token("'two words' tail") == ("two words", "tail")
    assert split_first_token("   ") == ("", "")
