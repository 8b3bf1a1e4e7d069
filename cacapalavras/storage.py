"""Binary word-list file: a count, then each word as length and bytes."""

from __future__ import annotations

import os
import struct
from collections.abc import Iterable

DEFAULT_PATH = "palavras.bin"

_INT = struct.Struct("<i")


class StorageError(Exception):
    """The word file could not be written or read."""


def encode_words(words: Iterable[str]) -> bytes:
    """Serialise ``words``; an empty list is refused."""
    items = list(words)
    if not items:
        raise StorageError("lista de palavras invalida ou numero de palavras <=0")
    parts = [_INT.pack(len(items))]
    for word in items:
        raw = word.encode("utf-8")
        parts.append(_INT.pack(len(raw)))
        parts.append(raw)
    return b"".join(parts)


def _read_int(data: bytes, offset: int, what: str) -> tuple[int, int]:
    if offset + _INT.size > len(data):
        raise StorageError(f"erro ao ler {what}")
    (value,) = _INT.unpack_from(data, offset)
    return value, offset + _INT.size


def decode_words(data: bytes) -> list[str]:
    """Parse a serialised word list; trailing bytes are ignored."""
    count, offset = _read_int(data, 0, "numero de palavras")
    if count <= 0:
        raise StorageError(f"Arquivo vazio ou com numero invalido de palavras ({count}).")
    words = []
    for index in range(count):
        size, offset = _read_int(data, offset, f"tamanho da palavra {index}")
        if size < 0 or offset + size > len(data):
            raise StorageError(f"erro ao ler a palavra {index}")
        try:
            words.append(data[offset:offset + size].decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise StorageError(f"erro ao ler a palavra {index}") from exc
        offset += size
    return words


def save_words(words: Iterable[str], path: str | os.PathLike = DEFAULT_PATH) -> None:
    """Write ``words`` to ``path``; a partly written file is removed."""
    payload = encode_words(words)
    try:
        handle = open(path, "wb")
    except OSError as exc:
        raise StorageError("erro ao criar arquivo") from exc
    try:
        with handle:
            handle.write(payload)
    except OSError as exc:
        try:
            os.remove(path)
        except OSError:
            pass
        raise StorageError("erro ao escrever no arquivo") from exc


def load_words(path: str | os.PathLike = DEFAULT_PATH) -> list[str]:
    """Read the word list stored at ``path``."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise StorageError("erro ao abrir para leitura o arquivo") from exc
    return decode_words(data)


def storage_exists(path: str | os.PathLike = DEFAULT_PATH) -> bool:
    """Whether ``path`` can be opened for reading."""
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False