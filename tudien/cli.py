"""Command-line front end for the English–Vietnamese dictionary."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from tudien.dictionary import SUGGESTION_HEADER, Dictionary, DictionaryError
from tudien.history import DEFAULT_HISTORY_PATH, SearchHistory
from tudien.loader import load_database

DEFAULT_DICTIONARY_PATH = "Tudien"

ADDED_MESSAGE = "Thêm từ thành công"
REMOVED_MESSAGE = "Xóa từ thành công"
HISTORY_CLEARED_MESSAGE = "Đã xóa xong"
PROMPT = "Nhap tu:"
NOT_FOUND_PLAIN = "Khong co tu"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tudien", description="Từ điển Anh Việt")
    parser.add_argument("--dict", dest="dict_path", default=DEFAULT_DICTIONARY_PATH,
                        help="dictionary file")
    parser.add_argument("--history", dest="history_path", default=DEFAULT_HISTORY_PATH,
                        help="search history file")
    commands = parser.add_subparsers(dest="command", required=True)

    search = commands.add_parser("search", help="look up a word")
    search.add_argument("word")

    add = commands.add_parser("add", help="add a word and its meaning")
    add.add_argument("word")
    add.add_argument("meaning")

    delete = commands.add_parser("delete", help="remove a word")
    delete.add_argument("word")

    complete = commands.add_parser("complete", help="list words starting with a prefix")
    complete.add_argument("prefix")

    suggest = commands.add_parser("suggest", help="list words near a word")
    suggest.add_argument("word")

    history = commands.add_parser("history", help="show the search history")
    history.add_argument("--clear", action="store_true", help="erase the history")

    load = commands.add_parser("load", help="import a text database")
    load.add_argument("database")
    load.add_argument("--ask", action="store_true",
                      help="afterwards prompt for a word and show its meaning")
    return parser


def _search(dictionary: Dictionary, history: SearchHistory, word: str) -> int:
    if word:
        history.record(word)
    print(dictionary.lookup(word))
    return 0


def _suggest(dictionary: Dictionary, word: str) -> int:
    words = dictionary.suggest(word)
    if word in dictionary:
        for item in words:
            print(item)
    else:
        print(SUGGESTION_HEADER, end="")
        for item in words:
            print(item)
    return 0


def _load(dictionary: Dictionary, database: str, ask: bool) -> int:
    load_database(dictionary, database)
    dictionary.save()
    if ask:
        word = input(PROMPT)
        if word in dictionary:
            print(dictionary.lookup(word), end="")
        else:
            print(NOT_FOUND_PLAIN)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Run the dictionary command line and return the exit status."""
    args = _build_parser().parse_args(argv)
    history = SearchHistory(args.history_path)
    try:
        dictionary = Dictionary(args.dict_path)
        if args.command == "search":
            return _search(dictionary, history, args.word)
        if args.command == "add":
            dictionary.add(args.word, args.meaning)
            dictionary.save()
            print(ADDED_MESSAGE)
            return 0
        if args.command == "delete":
            dictionary.remove(args.word)
            dictionary.save()
            print(REMOVED_MESSAGE)
            return 0
        if args.command == "complete":
            for item in dictionary.complete(args.prefix):
                print(item)
            return 0
        if args.command == "suggest":
            return _suggest(dictionary, args.word)
        if args.command == "history":
            if args.clear:
                history.clear()
                print(HISTORY_CLEARED_MESSAGE)
            else:
                print(history.text(), end="")
            return 0
        return _load(dictionary, args.database, args.ask)
    except DictionaryError as exc:
        print(exc, file=sys.stderr)
        return 1
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())