"""English–Vietnamese word store with lookup, completion and near-word suggestions."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Iterator, List, Optional, Union

from tudien.jrb import JrbNode, RedBlackTree

SUGGESTION_HEADER = "Có phải bạn muốn tìm:\n"
COMPLETION_LIMIT = 9
SUGGESTION_LIMIT = 5

PathLike = Union[str, "os.PathLike[str]"]


class DictionaryError(Exception):
    """Base class for dictionary errors; ``word`` names the word involved."""

    message = "Lỗi từ điển"

    def __init__(self, word: str = "") -> None:
        super().__init__(word)
        self.word = word

    def __str__(self) -> str:
        return self.message


class WordNotFoundError(DictionaryError):
    message = "Không tồn tại từ này trong từ điển"


class DuplicateWordError(DictionaryError):
    message = "Lỗi từ vừa nhập đã có trong từ điển"


class EmptyWordError(DictionaryError):
    message = "Lỗi chưa nhập từ"


class EmptyMeaningError(DictionaryError):
    message = "Lỗi chưa nhập nghĩa của từ"


class Dictionary:
    """Words and their meanings kept in key order.

    With a ``path`` the entries are read from that file when it exists, and
    :meth:`save` writes them back.  Without one the dictionary lives in memory.
    """

    def __init__(self, path: Optional[PathLike] = None) -> None:
        self.path: Optional[Path] = Path(path) if path is not None else None
        self._tree = RedBlackTree()
        if self.path is not None and self.path.exists():
            self._read(self.path)

    def _read(self, path: Path) -> None:
        try:
            with path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except (OSError, ValueError) as exc:
            raise DictionaryError(str(path)) from exc
        if not isinstance(data, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in data.items()
        ):
            raise DictionaryError(str(path))
        for word, meaning in data.items():
            self[word] = meaning

    @staticmethod
    def _require_word(word: str) -> None:
        if not word:
            raise EmptyWordError(word)

    def _node(self, word: str) -> JrbNode:
        node = self._tree.find(word)
        if node is None:
            raise WordNotFoundError(word)
        return node

    def lookup(self, word: str) -> str:
        """Return the meaning of ``word``."""
        self._require_word(word)
        return self._node(word).value

    def add(self, word: str, meaning: str) -> None:
        """Add a new word; it must not be present and its meaning must not be empty."""
        self._require_word(word)
        if not meaning:
            raise EmptyMeaningError(word)
        if word in self:
            raise DuplicateWordError(word)
        self._tree.insert(word, meaning)

    def update(self, word: str, meaning: str) -> None:
        """Replace the meaning of a word already present."""
        self._require_word(word)
        self._node(word).value = meaning

    def remove(self, word: str) -> None:
        """Delete ``word`` from the dictionary."""
        self._require_word(word)
        self._tree.delete_node(self._node(word))

    def __setitem__(self, word: str, meaning: str) -> None:
        node = self._tree.find(word)
        if node is None:
            self._tree.insert(word, meaning)
        else:
            node.value = meaning

    def _following(self, word: str) -> Optional[JrbNode]:
        """First node whose key sorts after ``word``."""
        node, found = self._tree.find_gte(word)
        if found:
            return node.next()
        return node

    def complete(self, word: str) -> List[str]:
        """Return ``word`` if present, then up to nine following words that start with it."""
        result = [word] if word in self else []
        node = self._following(word)
        while node is not None and len(result) - (word in self) < COMPLETION_LIMIT:
            if not node.key.startswith(word):
                break
            result.append(node.key)
            node = node.next()
        return result

    def suggest(self, word: str) -> List[str]:
        """Return words near a missing ``word``: up to five before it, nearest first, then up to five after.

        Only words sharing the first letter of ``word`` are offered.  When
        ``word`` is present, its completions are returned instead.
        """
        if word in self:
            return self.complete(word)
        if not word:
            return []
        initial = word[0]
        after = self._following(word)
        before_words: List[str] = []
        node = after.prev() if after is not None else self._tree.last()
        while node is not None and len(before_words) < SUGGESTION_LIMIT:
            if node.key[:1] != initial:
                break
            before_words.append(node.key)
            node = node.prev()
        after_words: List[str] = []
        node = after
        while node is not None and len(after_words) < SUGGESTION_LIMIT:
            if node.key[:1] != initial:
                break
            after_words.append(node.key)
            node = node.next()
        return before_words + after_words

    def save(self) -> None:
        """Write every entry to the dictionary's file; does nothing without a path."""
        if self.path is None:
            return
        data = {node.key: node.value for node in self._tree}
        directory = self.path.parent
        directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=".tudien-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(data, handle, ensure_ascii=False, indent=0)
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self._tree.find(word) is not None

    def __iter__(self) -> Iterator[str]:
        return (node.key for node in self._tree)

    def __len__(self) -> int:
        return len(self._tree)