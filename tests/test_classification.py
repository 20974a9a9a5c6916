from lyric_syllables.classification import classify_line


def test_header_lines():
    assert classify_line("[Chorus]").is_header
    assert classify_line("  [Verse 2]  ").is_header
    assert classify_line("[]").is_header
    assert not classify_line("[Chorus] la la").is_header


def test_comment_lines():
    result = classify_line("   # fix this")
    assert result.is_comment
    assert not result.is_header


def test_flags_are_evaluated_independently():
    """A bracketed line is not a comment and a hash line is not a header."""
    assert classify_line("[#1]") == (True, False)
    assert classify_line("#[tag]") == (False, True)


def test_content_and_empty_lines():
    assert classify_line("just words") == (False, False)
    assert classify_line("") == (False, False)
