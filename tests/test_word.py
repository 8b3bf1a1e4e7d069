from cacapalavras.word import MAX_LENGTH, Word


def test_from_text_starts_unplaced():
    word = Word.from_text("banana")
    assert word.text == "banana"
    assert word.start == (0, 0)
    assert word.end == (0, 0)
    assert word.is_found() is False


def test_from_text_truncates_long_text():
    word = Word.from_text("a" * 30)
    assert len(word.text) == MAX_LENGTH
    assert word.text == "a" * MAX_LENGTH


def test_from_text_keeps_text_at_limit():
    text = "b" * MAX_LENGTH
    assert Word.from_text(text).text == text


def test_length_matches_text():
    assert Word.from_text("morango").length() == len("morango")


def test_is_found_after_marking():
    word = Word.from_text("cereja")
    word.found = True
    assert word.is_found() is True
    assert word.length() == len("cereja")


def test_positions_are_mutable():
    word = Word.from_text("tomate")
    word.start = (1, 2)
    word.end = (1, 7)
    assert (word.start, word.end) == ((1, 2), (1, 7))