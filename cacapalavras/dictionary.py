"""The list of candidate words, its persistence and random selection."""

from __future__ import annotations

import os
import random
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from .logs import LogLevel, log_to_file, print_error, print_success, print_warning
from .storage import DEFAULT_PATH, StorageError, load_words, save_words, storage_exists
from .word import Word

DEFAULT_LOG = "log_programa.log"
MIN_LENGTH = 5
MAX_LENGTH = 20

DEFAULT_WORDS = (
    "abacaxi", "ameixa", "amora", "araca", "banana", "cacau", "caqui", "cereja",
    "damasco", "goiaba", "laranja", "limao", "lichia",
    "manga", "melao", "mamao", "morango", "pessego", "pitanga", "sapoti",
    "abobora", "agriao", "alface", "aspargo", "batata", "cebola", "cenoura", "chuchu",
    "couve", "ervilha", "feijao", "inhame", "milho", "pepino", "quiabo",
    "maniva", "repolho", "rucula", "salsao", "tomate", "acelga", "broto", "vagem", "trevo",
    "apito", "aviao", "balao", "balde", "banco", "barco", "bolsa", "botao",
    "caixa", "caneca", "caneta", "carro", "carta", "cesto", "chave", "colher",
    "espada", "espelho", "forno", "garfo",
    "globo", "guarda", "haste", "janela", "jarra",
    "abelha", "cabra", "cisne", "cobra", "coelho", "coruja", "formiga", "galinha",
    "ganso", "jabuti", "macaco", "morcego", "ovelha", "panda", "papagaio",
    "pomba", "pinguim", "porco", "pulga", "texugo", "tigre", "touro", "zebra",
    "alpaca", "burro", "camelo",
    "branco", "cobre", "dourado", "marrom", "preto", "verde", "amarelo",
    "cinza", "prata", "creme", "violeta", "indigo", "ciano", "magenta", "carmim", "lilas",
    "bronze", "salmao", "palha", "siena", "trigo", "vinho", "azulejo",
    "andar", "beber", "cantar", "correr", "dormir", "falar", "olhar", "pular", "comer",
    "abrir", "ajudar", "apoiar", "banhar", "chamar", "criar", "dancar", "ensinar",
    "entrar", "estudar", "fazer", "fechar", "ganhar", "gostar", "gritar", "jogar",
    "limpar", "morar",
)


class DictionaryError(Exception):
    """A change to the word list was refused."""


class InvalidWordError(DictionaryError, ValueError):
    """The word is missing or its length is outside the allowed range."""


class DuplicateWordError(DictionaryError):
    """The word is already in the list."""


class WordNotFoundError(DictionaryError, LookupError):
    """The word is not in the list."""


def _valid_length(word: str) -> bool:
    return MIN_LENGTH <= len(word) <= MAX_LENGTH


def format_listing(words: Iterable[str]) -> str:
    """Join words as ``a, b e c.``, breaking the line after every tenth gap."""
    items = list(words)
    last = len(items) - 1
    parts = []
    for index, word in enumerate(items):
        parts.append(word)
        if index < last - 1:
            parts.append(", ")
        elif index == last - 1:
            parts.append(" e ")
        else:
            parts.append(".")
        if index % 10 == 0 and index != 0:
            parts.append("\n")
    return "".join(parts)


def to_words(texts: Iterable[str]) -> list[Word]:
    """Turn plain strings into unplaced :class:`Word` objects."""
    items = list(texts)
    if not items:
        raise ValueError("lista de textos invalida ou numero de palavras <=0")
    if any(text is None for text in items):
        raise ValueError("erro ao selecionar palavra")
    return [Word.from_text(text) for text in items]


class WordDictionary:
    """An ordered set of words between 5 and 20 letters, backed by a file."""

    def __init__(
        self,
        storage_path: str | os.PathLike = DEFAULT_PATH,
        log_path: str | os.PathLike = DEFAULT_LOG,
        rng: random.Random | None = None,
    ) -> None:
        self.storage_path = storage_path
        self.log_path = log_path
        self.rng = rng if rng is not None else random.Random()
        self._words: list[str] = []

    def _log(self, level: LogLevel, message: str) -> None:
        log_to_file(self.log_path, level, message + "\n")

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._words))

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def insert(self, word: str | None, verbose: bool = False) -> None:
        """Append ``word``; invalid or repeated words are refused."""
        if word is None:
            self._log(LogLevel.ERROR, "Palavra nao passada na funcao")
            print_error("A palavra não foi informada...\n", verbose)
            raise InvalidWordError("A palavra não foi informada")
        if not _valid_length(word):
            self._log(LogLevel.ERROR, "Palavra fora do range de 5 a 20 caracteres")
            print_error(f"A palavra {word} esta fora do range de 5 a 20 caracteres\n", verbose)
            raise InvalidWordError(f"A palavra {word} esta fora do range de 5 a 20 caracteres")
        if word in self._words:
            print_warning(f"Palavra '{word}' ja existe na lista de palavras...\n", verbose)
            raise DuplicateWordError(f"Palavra '{word}' ja existe na lista de palavras")
        self._words.append(word)
        self._log(LogLevel.INFO, f"Palavra '{word}' adicionada com sucesso.")
        print_success(f"Palavra '{word}' adicionada com sucesso.\n", verbose)

    def remove(self, word: str, verbose: bool = False) -> None:
        """Delete ``word`` from the list."""
        if word not in self._words:
            self._log(LogLevel.ERROR, f"A palavra '{word}' nao foi encontrada no array de palavras")
            print_warning(f"A palavra '{word}' nao foi encontrada na lista de palavras\n", verbose)
            raise WordNotFoundError(f"A palavra '{word}' nao foi encontrada na lista de palavras")
        self._words.remove(word)
        if not self._words:
            self._log(LogLevel.INFO, f"Removido a palavra '{word}' e o array de palavras esta vazio")
            print_success(
                f"Removido a palavra '{word}' e a lista de palavras esta vazia\n", verbose
            )
        else:
            self._log(LogLevel.INFO, f"Removido a palavra '{word}' do array de palavras")
            print_success(f"Palavra '{word}' removida com sucesso!\n", verbose)

    def update(self, old: str | None, new: str | None, verbose: bool = False) -> None:
        """Replace ``old`` with ``new`` in the same position."""
        if old is None or new is None:
            self._log(LogLevel.ERROR, "Palavras nao passadas na funcao")
            print_error("As palavras não foram informadas...\n", verbose)
            raise InvalidWordError("As palavras não foram informadas")
        if new in self._words:
            print_warning(f"Palavra '{new}' ja existe na lista de palavras...\n", verbose)
            raise DuplicateWordError(f"Palavra '{new}' ja existe na lista de palavras")
        if old not in self._words:
            print_warning(f"Palavra '{old}' não existe na lista de palavras...\n", verbose)
            raise WordNotFoundError(f"Palavra '{old}' não existe na lista de palavras")
        if not _valid_length(new):
            self._log(LogLevel.ERROR, "Nova palavra fora do range de 5 a 20 caracteres")
            print_error(
                f"A nova palavra '{new}' está fora do range de 5 a 20 caracteres\n", verbose
            )
            raise InvalidWordError(f"A nova palavra '{new}' está fora do range de 5 a 20 caracteres")
        self._words[self._words.index(old)] = new
        self._log(LogLevel.INFO, f"Palavra '{old}' atualizada para '{new}'")
        print_success(f"Palavra '{old}' atualizada para '{new}'\n", verbose)

    def clear(self, verbose: bool = False) -> None:
        """Remove every word."""
        self._words.clear()
        self._log(LogLevel.INFO, "Array de palavras liberado na memoria")
        print_success("Lista de palavras foi limpa", verbose)

    def listing(self) -> str:
        """The words as one readable sentence."""
        return format_listing(self._words)

    def show(self, stream: TextIO | None = None) -> None:
        """Write the listing to ``stream`` and record every word in the log."""
        self._log(LogLevel.INFO, f"\n--- Palavras Atuais no Array ({len(self._words)}) ---")
        if not self._words:
            self._log(LogLevel.ERROR, "Array vazio.")
            return
        for number, word in enumerate(self._words, start=1):
            self._log(LogLevel.INFO, f"{number}: {word}")
        target = stream if stream is not None else sys.stdout
        target.write(self.listing())
        self._log(LogLevel.INFO, "---------------------------------------")

    def _fill(self, words: Iterable[str]) -> None:
        self._words.clear()
        for word in words:
            try:
                self.insert(word)
            except DictionaryError:
                continue

    def save(self) -> None:
        """Write the list to the storage file."""
        if not self._words:
            self._log(LogLevel.ERROR, "Erro: lista de textos invalida ou numero de palavras <=0 ")
            print_warning("lista de palavras invalida ou numero de palavras <=0 \n")
            raise StorageError("lista de palavras invalida ou numero de palavras <=0")
        try:
            save_words(self._words, self.storage_path)
        except StorageError as exc:
            self._log(LogLevel.ERROR, str(exc))
            print_error(f"{exc}\n")
            raise
        self._log(LogLevel.INFO, "Dados criados com sucesso no arquivo.")
        print_success("Dados criados com sucesso no arquivo.\n")

    def load_defaults(self) -> None:
        """Replace the list with the built-in words and save it."""
        self.clear()
        self._log(LogLevel.INFO, f"Inicializando array com {len(DEFAULT_WORDS)} palavras...")
        self._fill(DEFAULT_WORDS)
        self._log(LogLevel.INFO, "Array inicializado.")
        try:
            self.save()
        except StorageError:
            pass

    def initialize(self, recreate: bool = False) -> None:
        """Load the saved list, falling back to the built-in words."""
        if recreate:
            self.load_defaults()
            return
        if not storage_exists(self.storage_path):
            self._log(LogLevel.ERROR, "Arquivo nao encontrado. Inicializa com palavras padrao.")
            self.load_defaults()
            return
        self._log(LogLevel.INFO, "Carregando arquivo de dados")
        self.clear()
        try:
            stored = load_words(self.storage_path)
        except StorageError as exc:
            self._log(LogLevel.ERROR, str(exc))
            self._log(LogLevel.ERROR, "Falha ao carregar dados do arquivo.")
            self.load_defaults()
            return
        self._log(LogLevel.INFO, "Dados lidos com sucesso do arquivo")
        self._fill(stored)
        self._log(LogLevel.INFO, f"Inicializando array com {len(stored)} palavras...")
        self._log(LogLevel.INFO, "Array inicializado com arquivo.")

    def sample(self, count: int) -> list[str]:
        """Draw ``count`` distinct words at random."""
        if count <= 0 or count > len(self._words):
            self._log(
                LogLevel.ERROR,
                f"O numero de sorteio deve ser entre 1 e {len(self._words)}",
            )
            raise ValueError(f"O numero de sorteio deve ser entre 1 e {len(self._words)}")
        return self.rng.sample(self._words, count)

    def pick_words(self, count: int, recreate: bool = False) -> list[Word]:
        """Initialise the list and return ``count`` random words to hide."""
        if count <= 0:
            self._log(LogLevel.ERROR, "numero menor que 0")
            raise ValueError("numero de escolhas deve ser positivo")
        self.initialize(recreate)
        if count > len(self._words):
            message = (
                f"Numero de escolhas ({count}) e maior que o numero de palavras "
                f"disponiveis ({len(self._words)})."
            )
            self._log(LogLevel.ERROR, message)
            raise ValueError(message)
        words = to_words(self.sample(count))
        self._log(LogLevel.INFO, "\n--- Lista de Palavras Lidas do Arquivo () ---")
        for number, word in enumerate(words, start=1):
            self._log(LogLevel.INFO, f"Palavra {number}: {word.text}")
            self._log(LogLevel.INFO, f"  Inicio: [{word.start[0]}, {word.start[1]}]")
            self._log(LogLevel.INFO, f"  Fim:    [{word.end[0]}, {word.end[1]}]")
            self._log(LogLevel.INFO, "---")
        return words