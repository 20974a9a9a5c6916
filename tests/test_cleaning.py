from lyric_syllables.cleaning import clean_word, reconstruct_syllables


def test_clean_word_strips_punctuation_and_digits():
    assert clean_word("(feiern,") == "feiern"
    assert clean_word("rock'n'roll!") == "rock'n'roll"
    assert clean_word("well-known.") == "well-known"
    assert clean_word("2nd") == "nd"
    assert clean_word("...") == ""


def test_clean_word_keeps_unicode_letters_and_marks():
    assert clean_word("«Über»") == "Über"
    # Decomposed e + combining acute accent stays together.
    assert clean_word("cafe\u0301!") == "cafe\u0301"
    assert clean_word("Привет,") == "Привет"


def test_clean_word_keeps_bare_joiners():
    """A dash or apostrophe on its own survives cleaning."""
    assert clean_word("-") == "-"
    assert clean_word("''") == "''"
    assert clean_word("(-)") == "-"


def test_reconstruct_attaches_prefix_and_suffix():
    assert reconstruct_syllables("(feiern,", "feiern", ["fei", "ern"]) == ["(fei", "ern,"]
    assert reconstruct_syllables("beautiful,", "beautiful", ["beau", "ti", "ful"]) == [
        "beau",
        "ti",
        "ful,",
    ]


def test_reconstruct_single_part_takes_both_edges():
    assert reconstruct_syllables('"love!"', "love", ["love"]) == ['"love!"']


def test_reconstruct_falls_back_when_clean_word_is_not_contiguous():
    """An interior em-dash means the clean word cannot be found in the raw token."""
    assert reconstruct_syllables("sum—mer", "summer", ["sum", "mer"]) == ["sum—mer"]


def test_reconstruct_empty_parts_returns_raw():
    assert reconstruct_syllables("word", "word", []) == ["word"]
