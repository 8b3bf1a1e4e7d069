"""The word-search board and the interactive game played on it."""

from __future__ import annotations

import random
import string
import sys
from collections.abc import Callable, Iterable, Sequence
from enum import IntEnum

from .word import Position, Word

EMPTY = " "
MIN_SIZE = 7
MAX_SIZE = 9
WORDS_PER_GAME = 5

CLEAR_SCREEN = "\033[2J\033[H"

END_MENU = (
    "\n|===CAÇA PALAVRAS===|\n"
    "1 - Novo Jogo\n"
    "2 - Menu Inicial\n"
    "0 - Sair\n"
    "Escolha uma opção : \n"
)

Reader = Callable[[], str]
Writer = Callable[[str], object]


class Direction(IntEnum):
    """Ways a word can run across the board."""

    HORIZONTAL = 0
    VERTICAL = 1
    DIAGONAL = 2

    @property
    def step(self) -> Position:
        """Row and column increments from one letter to the next."""
        return _STEPS[self]


_STEPS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL: (1, 1),
}


def _direction_between(start: Position, end: Position) -> Direction:
    if start[0] == end[0]:
        return Direction.HORIZONTAL
    if start[1] == end[1]:
        return Direction.VERTICAL
    return Direction.DIAGONAL


class Board:
    """A grid of letters in which words are hidden."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError("o tabuleiro precisa de linhas e colunas positivas")
        self.rows = rows
        self.cols = cols
        self.grid = [[EMPTY] * cols for _ in range(rows)]

    def _inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _path(self, length: int, row: int, col: int, direction: Direction | int) -> list[Position]:
        drow, dcol = Direction(direction).step
        return [(row + drow * i, col + dcol * i) for i in range(length)]

    def fits(self, text: str, row: int, col: int, direction: Direction | int) -> bool:
        """Whether ``text`` starting at (row, col) stays inside the board."""
        if not self._inside(row, col):
            return False
        return all(self._inside(r, c) for r, c in self._path(len(text), row, col, direction))

    def is_free(self, text: str, row: int, col: int, direction: Direction | int) -> bool:
        """Whether every cell ``text`` would cover is still empty."""
        return all(
            self.grid[r][c] == EMPTY
            for r, c in self._path(len(text), row, col, direction)
            if self._inside(r, c)
        )

    def place(self, word: Word, row: int, col: int, direction: Direction | int) -> None:
        """Write ``word`` onto the board and record its start and end cells."""
        if not self.fits(word.text, row, col, direction):
            raise ValueError(f"a palavra '{word.text}' nao cabe na posicao ({row}, {col})")
        path = self._path(word.length(), row, col, direction)
        for (r, c), letter in zip(path, word.text):
            self.grid[r][c] = letter
        word.start = (row, col)
        word.end = path[-1] if path else (row, col)

    def place_all(self, words: Iterable[Word], rng: random.Random) -> None:
        """Hide every word at a random free position and direction."""
        items = list(words)
        longest = max(self.rows, self.cols)
        for word in items:
            if word.length() > longest:
                raise ValueError(f"a palavra '{word.text}' nao cabe no tabuleiro")
        for word in items:
            while True:
                row = rng.randrange(self.rows)
                col = rng.randrange(self.cols)
                direction = Direction(rng.randrange(len(Direction)))
                if self.fits(word.text, row, col, direction) and self.is_free(
                    word.text, row, col, direction
                ):
                    self.place(word, row, col, direction)
                    break

    def fill_random(self, rng: random.Random) -> None:
        """Fill every empty cell with a random lower-case letter."""
        for line in self.grid:
            for index, cell in enumerate(line):
                if cell == EMPTY:
                    line[index] = string.ascii_lowercase[rng.randrange(26)]

    def render(self) -> str:
        """The board with column and row indices."""
        lines = ["    " + "".join(f"{col:2d} " for col in range(self.cols))]
        lines.append("   " + "---" * self.cols)
        for number, line in enumerate(self.grid):
            lines.append(f"{number:2d}| " + "".join(f"{cell:>2} " for cell in line))
        return "\n".join(lines) + "\n"

    def mark_found(
        self, words: Iterable[Word], start: Position, end: Position, attempt: int
    ) -> bool:
        """Mark the word spanning ``start``..``end`` (either way round) as found.

        Its letters are replaced by the digit of the attempt number.
        """
        start, end = tuple(start), tuple(end)
        marker = chr(ord("0") + attempt + 1)
        for word in words:
            if word.is_found():
                continue
            if (word.start, word.end) not in ((start, end), (end, start)):
                continue
            direction = _direction_between(word.start, word.end)
            for r, c in self._path(word.length(), *word.start, direction):
                self.grid[r][c] = marker
            word.found = True
            return True
        return False


def _streams(read: Reader | None, write: Writer | None) -> tuple[Reader, Writer]:
    return (read if read is not None else input, write if write is not None else sys.stdout.write)


def _parse_int(line: str) -> int | None:
    tokens = line.split()
    if not tokens:
        return None
    try:
        return int(tokens[0])
    except ValueError:
        return None


def _ask_size(label: str, read: Reader, write: Writer) -> int:
    while True:
        write(f"\nquantas {label} vai ter o caça palavras? min={MIN_SIZE} max={MAX_SIZE} \n")
        value = _parse_int(read())
        if value is not None and MIN_SIZE <= value <= MAX_SIZE:
            return value
        write(f"\nA quantidade de {label} deve estar entre {MIN_SIZE} e {MAX_SIZE}!\n")


def ask_dimensions(read: Reader | None = None, write: Writer | None = None) -> tuple[int, int]:
    """Ask for the number of rows and columns, each between 7 and 9."""
    read, write = _streams(read, write)
    rows = _ask_size("linhas", read, write)
    cols = _ask_size("colunas", read, write)
    return rows, cols


def read_position(
    prompt: str,
    rows: int,
    cols: int,
    read: Reader | None = None,
    write: Writer | None = None,
) -> Position:
    """Ask until two integers inside the board are given."""
    read, write = _streams(read, write)
    while True:
        write(f"\n{prompt}")
        tokens = read().split()
        try:
            row, col = int(tokens[0]), int(tokens[1])
        except (IndexError, ValueError):
            write("Entrada inválida! Digite dois números inteiros separados por espaço.\n")
            continue
        if not (0 <= row < rows and 0 <= col < cols):
            write("Entrada inválida! Fora dos limites da matriz.\n")
            continue
        return row, col


def remaining_words(words: Iterable[Word]) -> list[str]:
    """Texts of the words not yet found, in order."""
    return [word.text for word in words if not word.is_found()]


def play(
    board: Board,
    words: Sequence[Word],
    dictionary=None,
    read: Reader | None = None,
    write: Writer | None = None,
) -> None:
    """Run the guessing loop until every word is found, then the end menu.

    Choosing a new game draws fresh words from ``dictionary``; choosing to
    quit raises :class:`SystemExit`.
    """
    read, write = _streams(read, write)
    attempts = 0
    while not all(word.is_found() for word in words):
        write(f"\ntentativa {attempts + 1}\n")
        write(board.render())
        write("\nPalavras Restantes: " + ", ".join(remaining_words(words)))
        start = read_position(
            "Digite a posição inicial da palavra encontrada (x y): ",
            board.rows, board.cols, read, write,
        )
        end = read_position(
            "Digite a posição final da palavra encontrada (x y): ",
            board.rows, board.cols, read, write,
        )
        write(CLEAR_SCREEN)
        if board.mark_found(words, start, end, attempts):
            attempts += 1
            write("\nEncontrou uma palavra!\n")
        else:
            write("\nNão encontrou uma palavra, tente novamente!\n")

    write(CLEAR_SCREEN)
    write("PARABÉNS, VOCÊ GANHOU!!!\n")
    write(f"tentativas jogadas: {attempts}")
    write(END_MENU)
    choice = _parse_int(read())
    if choice == 1:
        if dictionary is None:
            return
        start_game(dictionary.pick_words(WORDS_PER_GAME), dictionary, dictionary.rng, read, write)
    elif choice == 2:
        return
    else:
        raise SystemExit(0)


def start_game(
    words: Sequence[Word],
    dictionary=None,
    rng: random.Random | None = None,
    read: Reader | None = None,
    write: Writer | None = None,
) -> None:
    """Ask for the board size, hide ``words`` in it and play."""
    read, write = _streams(read, write)
    rng = rng if rng is not None else random.Random()
    rows, cols = ask_dimensions(read, write)
    board = Board(rows, cols)
    board.place_all(words, rng)
    board.fill_random(rng)
    write(CLEAR_SCREEN)
    write("\nJOGO INICIADO!!!")
    play(board, words, dictionary, read, write)