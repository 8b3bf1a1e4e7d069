import struct

import pytest

from cacapalavras.storage import (
    StorageError,
    decode_words,
    encode_words,
    load_words,
    save_words,
    storage_exists,
)


def test_encode_single_word_wire_bytes():
    assert encode_words(["banana"]) == b"\x01\x00\x00\x00\x06\x00\x00\x00banana"


@pytest.mark.parametrize(
    "words",
    [["abacaxi"], ["banana", "cereja", "goiaba"], ["limao", "melao", "mamao", "trigo"]],
)
def test_round_trip(words):
    assert decode_words(encode_words(words)) == words


def test_encode_rejects_empty():
    with pytest.raises(StorageError):
        encode_words([])


def test_decode_rejects_empty_data():
    with pytest.raises(StorageError):
        decode_words(b"")


def test_decode_rejects_zero_count():
    with pytest.raises(StorageError):
        decode_words(struct.pack("<i", 0))


def test_decode_rejects_truncated_word():
    data = encode_words(["banana", "cereja"])
    with pytest.raises(StorageError):
        decode_words(data[:-2])


def test_decode_rejects_missing_length():
    data = encode_words(["banana", "cereja"])
    cut = len(encode_words(["banana"]))
    with pytest.raises(StorageError):
        decode_words(data[:cut])


def test_decode_ignores_trailing_bytes():
    data = encode_words(["banana"]) + b"extra"
    assert decode_words(data) == ["banana"]


def test_save_and_load(tmp_path):
    path = tmp_path / "words.bin"
    save_words(["pitanga", "sapoti"], path)
    assert load_words(path) == ["pitanga", "sapoti"]


def test_save_overwrites(tmp_path):
    path = tmp_path / "words.bin"
    save_words(["pitanga", "sapoti"], path)
    save_words(["quiabo"], path)
    assert load_words(path) == ["quiabo"]


def test_storage_exists(tmp_path):
    path = tmp_path / "words.bin"
    assert storage_exists(path) is False
    save_words(["coruja"], path)
    assert storage_exists(path) is True


def test_load_missing_raises(tmp_path):
    with pytest.raises(StorageError):
        load_words(tmp_path / "absent.bin")


def test_save_to_directory_raises(tmp_path):
    with pytest.raises(StorageError):
        save_words(["coruja"], tmp_path)


def test_save_empty_raises_and_writes_nothing(tmp_path):
    path = tmp_path / "words.bin"
    with pytest.raises(StorageError):
        save_words([], path)
    assert storage_exists(path) is False