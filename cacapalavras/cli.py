"""Main menu of the word-search game."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable
from typing import TextIO

from .dictionary import DEFAULT_LOG, DictionaryError, WordDictionary
from .game import WORDS_PER_GAME, start_game
from .logs import LogLevel, log_to_file, print_error
from .storage import DEFAULT_PATH, StorageError

CLEAR_SCREEN = "\033[2J\033[H"

MAIN_MENU = (
    "\n|===CAÇA PALAVRAS===|\n"
    "1 - Iniciar Jogo\n"
    "2 - Inserir palavra\n"
    "3 - Atualizar palavra\n"
    "4 - Remover Palavra\n"
    "5 - Mostrar Palavras\n"
    "6 - Salvar Palavras\n"
    "7 - Limpar lista de palavras\n"
    "8 - Carregar lista de palavras base\n"
    "0 - Sair\n"
    "Escolha uma opção : \n"
)

Reader = Callable[[], str]
Writer = Callable[[str], object]


class _WriterStream:
    """File-like wrapper around a write callable."""

    def __init__(self, write: Writer) -> None:
        self._write = write

    def write(self, text: str) -> int:
        self._write(text)
        return len(text)

    def flush(self) -> None:
        pass


def clear_screen(stream: TextIO | None = None) -> None:
    """Clear the terminal and move the cursor to the top left corner."""
    target = stream if stream is not None else sys.stdout
    target.write(CLEAR_SCREEN)


def _choice(line: str) -> int | None:
    tokens = line.split()
    if not tokens:
        return None
    try:
        return int(tokens[0])
    except ValueError:
        return None


def _token(line: str) -> str:
    tokens = line.split()
    return tokens[0] if tokens else ""


def _ask_word(prompt: str, read: Reader, write: Writer) -> str:
    write(prompt)
    return _token(read())


def run_menu(
    dictionary: WordDictionary,
    rng: random.Random | None = None,
    read: Reader | None = None,
    write: Writer | None = None,
) -> None:
    """Show the main menu until the player chooses to leave."""
    read = read if read is not None else input
    write = write if write is not None else sys.stdout.write
    rng = rng if rng is not None else dictionary.rng
    stream = _WriterStream(write)

    while True:
        write(MAIN_MENU)
        try:
            choice = _choice(read())
        except EOFError:
            return
        clear_screen(stream)

        try:
            if choice == 1:
                try:
                    words = dictionary.pick_words(WORDS_PER_GAME)
                except ValueError as exc:
                    print_error(f"{exc}\n")
                    continue
                start_game(words, dictionary, rng, read, write)
            elif choice == 2:
                word = _ask_word("\ndigite a plavara que você quer inserir: ", read, write)
                try:
                    dictionary.insert(word, verbose=True)
                except DictionaryError:
                    pass
            elif choice == 3:
                old = _ask_word("\ndigite a plavara que você quer subtituir: ", read, write)
                new = _ask_word("\ndigite a nova plavara: ", read, write)
                try:
                    dictionary.update(old, new, verbose=True)
                except DictionaryError:
                    pass
            elif choice == 4:
                word = _ask_word("\ndigite a plavara que você quer remover: ", read, write)
                try:
                    dictionary.remove(word, verbose=True)
                except DictionaryError:
                    pass
            elif choice == 5:
                dictionary.show(stream)
            elif choice == 6:
                try:
                    dictionary.save()
                except StorageError:
                    pass
            elif choice == 7:
                dictionary.clear(verbose=True)
            elif choice == 8:
                dictionary.initialize(recreate=True)
            else:
                return
        except EOFError:
            return


def main(argv: list[str] | None = None) -> int:
    """Start the game from the command line."""
    parser = argparse.ArgumentParser(prog="cacapalavras", description="Caça palavras.")
    parser.add_argument("--words-file", default=DEFAULT_PATH, help="arquivo de palavras")
    parser.add_argument("--log-file", default=DEFAULT_LOG, help="arquivo de log")
    parser.add_argument("--seed", type=int, default=None, help="semente aleatoria")
    args = parser.parse_args(argv)

    log_to_file(args.log_file, LogLevel.INFO, "Inicio do log\n")
    rng = random.Random(args.seed)
    dictionary = WordDictionary(args.words_file, args.log_file, rng)
    dictionary.initialize(recreate=False)
    try:
        run_menu(dictionary, rng)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0
    return 0