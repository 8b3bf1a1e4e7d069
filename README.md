# cacapalavras

A word-search puzzle ("caça-palavras") played in the terminal. The words come from a
dictionary that you can edit and save. The prompts and messages are in Portuguese.

## Installation

```
pip install .
```

## Playing

```
cacapalavras [--words-file PATH] [--log-file PATH] [--seed N]
```

| Option | Default | Meaning |
|--------|---------|---------|
| `--words-file` | `palavras.bin` | binary file the dictionary is loaded from and saved to |
| `--log-file` | `log_programa.log` | file that activity is appended to |
| `--seed` | none | seed for the random generator, so that a game can be repeated |

The main menu offers these options:

| Option | Action |
|--------|--------|
| 1 | Start a game with five random words |
| 2 | Insert a word |
| 3 | Update a word |
| 4 | Remove a word |
| 5 | Show all words |
| 6 | Save the words to the words file |
| 7 | Clear the word list |
| 8 | Reload the built-in word list and save it |
| 0 (or anything else) | Quit |

A game first asks for the number of rows and then the number of columns. Each must be
between 7 and 9. The five words are hidden horizontally, vertically or diagonally (top
left to bottom right), and the remaining cells are filled with random lower-case
letters. The board is printed with row and column indices.

To claim a word, type the row and column of one end, for example `2 3`, and then the
row and column of the other end. The two ends may be given in either order. The
letters of a word you find are replaced by a digit showing whether it was the first,
second, and so on, word found. When all five are found, a final menu offers a new game
(1), a return to the main menu (2), or quitting (0).

## Dictionary

Words must be 5 to 20 characters long, and no word may appear twice. On start-up the
words file is loaded if it exists and can be read. Otherwise the built-in list of
words is used and written to the words file. Changes made from the menu are kept only
in memory until option 6 saves them.

The words file holds a little-endian 32-bit count, followed by each word as a
little-endian 32-bit byte length and its UTF-8 bytes. Each log line starts with
`[YYYY-MM-DD HH:MM:SS] [LEVEL]`, where the level is `INFO`, `WARNING` or `ERROR`.

The dictionary can also be used from Python:

```python
import random

from cacapalavras.dictionary import WordDictionary, DuplicateWordError

words = WordDictionary("palavras.bin", "log_programa.log", random.Random(1))
words.initialize(recreate=False)
try:
    words.insert("tangerina")
except DuplicateWordError:
    pass
picked = words.pick_words(5)        # list of cacapalavras.word.Word
print(words.listing())
```

`insert`, `update` and `remove` raise `InvalidWordError`, `DuplicateWordError` or
`WordNotFoundError`, all subclasses of `DictionaryError`. `save` raises
`cacapalavras.storage.StorageError` when the list is empty or the file cannot be
written. The board itself is available as `cacapalavras.game.Board`.

## Limitations

- Words run only left to right, top to bottom, or diagonally down and to the right;
  they are never hidden backwards.
- A word longer than the board's larger dimension cannot be placed, and starting a
  game with such a word fails with `ValueError`.

## Running the tests

```
pip install .[test]
pytest
```