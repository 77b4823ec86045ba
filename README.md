# tudien

An English–Vietnamese dictionary. Words and their meanings are kept in an
ordered red-black tree, so prefix completion and "did you mean" suggestions
come straight from the neighbouring keys. Lookups made from the command line
are written to a search history file.

## Installing

```
pip install .
```

## Command line

The `tudien` command takes a subcommand:

```
tudien search WORD            # print the meaning of WORD and record it in the history
tudien add WORD MEANING       # add a new word
tudien delete WORD            # remove a word
tudien complete PREFIX        # the prefix itself if present, then up to nine words starting with it
tudien suggest WORD           # nearby words when WORD is missing
tudien history                # print the search history
tudien history --clear        # erase the search history
tudien load DATABASE          # import a plain-text database
tudien load DATABASE --ask    # import, then prompt for a word and print its meaning
```

Two options come before the subcommand:

- `--dict PATH`: the dictionary file (default `Tudien`). It is a JSON object that
  maps each word to its meaning. It is read when the command starts and written
  back after `add`, `delete` and `load`.
- `--history PATH`: the search history file (default `history`). It holds one
  word per line.

Errors are printed to standard error and the command exits with status 1.
These include a missing word, a duplicate word, an empty word or meaning, and
an unreadable file. Run `tudien --help` to see the options.

### Database format

`load` reads a text file of records that each begin with `@`. The headword runs
to the first `/` or to the end of its line. When the headword ends at a `/`,
the character just before the slash is dropped. The meaning is everything up
to the next `@`, and it starts with the slash when there was one. A word that
appears more than once has its meanings joined together. Records without a
headword are skipped.

## Library use

```python
from tudien.dictionary import Dictionary, WordNotFoundError
from tudien.loader import load_database
from tudien.history import SearchHistory

d = Dictionary("Tudien")            # read from the file if it exists
load_database(d, "database")        # import entries from a text database

d.add("hello", "xin chào")
print(d.lookup("hello"))
d.update("hello", "chào")
print(d.complete("hel"))            # the prefix if present, then up to nine words starting with it
print(d.suggest("helo"))            # up to five words before and five after, same first letter
d.remove("hello")
d.save()                            # write the entries back as JSON

history = SearchHistory("history")
history.record("hello")
print(history.entries())
history.clear()
```

`Dictionary()` without a path keeps its entries in memory only. There,
`save()` does nothing. A `Dictionary` supports `in`, `len()` and iteration
over its words in sorted order.

Looking up, updating or removing a word that is not in the dictionary raises
`WordNotFoundError`. Adding a word that is already there raises
`DuplicateWordError`. An empty word raises `EmptyWordError`, and adding an
empty meaning raises `EmptyMeaningError`. All of these are subclasses of
`DictionaryError`, and their text is the Vietnamese message shown to the user.

The package also provides general-purpose building blocks:

- `tudien.jrb.RedBlackTree`: an ordered multimap with `insert`, `find`,
  `find_gte`, `delete_node`, `first`, `last` and forward and reverse iteration
  over its nodes.
- `tudien.dllist.DoublyLinkedList`: a linked list with insertion before or after
  any node and O(1) removal.
- `tudien.fields.InputStruct`: a line reader that splits each line into
  whitespace-separated fields. Create one with `new_inputstruct(filename)`,
  which reads standard input when no filename is given. Use
  `pipe_inputstruct(command)` to read the output of a shell command instead.

## What it does not do

There is no graphical window. Everything is done from the command line or the
library. Suggestions are printed on request rather than offered while you type.
The dictionary is stored as a single JSON file and is loaded into memory as a
whole.