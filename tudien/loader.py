"""Import of the plain-text dictionary database into a :class:`Dictionary`.

Each record starts with ``@``.  The headword runs to the first ``/`` (the
character before the slash, normally a space, is dropped) or to the end of the
line.  The meaning is everything after it up to the next ``@``; when the
headword ended at a slash, the meaning begins with that slash.
"""

from __future__ import annotations

import os
from typing import Iterator, Tuple, Union

from tudien.dictionary import Dictionary


def parse_database(text: str) -> Iterator[Tuple[str, str]]:
    """Yield ``(word, meaning)`` pairs in the order they appear in ``text``."""
    pos = 1
    end = len(text)
    while pos < end:
        i = pos
        while i < end and text[i] not in "/\n":
            i += 1
        if i < end and text[i] == "/":
            word = text[pos:i][:-1]
            pos = i
        elif i < end:
            word = text[pos:i]
            pos = i + 1
        else:
            word = text[pos:]
            pos = end
        at = text.find("@", pos)
        if at < 0:
            yield word, text[pos:]
            return
        yield word, text[pos:at]
        pos = at + 1


def load_database(
    dictionary: Dictionary, path: Union[str, "os.PathLike[str]"]
) -> int:
    """Read the database at ``path`` into ``dictionary``; return the number of records read.

    A word met again has its new meaning appended to the one already stored.
    Records without a headword are skipped.
    """
    with open(path, "r", encoding="utf-8") as handle:
        text = handle.read()
    count = 0
    for word, meaning in parse_database(text):
        count += 1
        if not word:
            continue
        if word in dictionary:
            dictionary[word] = dictionary.lookup(word) + meaning
        else:
            dictionary[word] = meaning
    return count