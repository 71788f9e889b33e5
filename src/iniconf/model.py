# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/12 22:31:08

"""
Ordered INI structure, safe to share between threads.

Unlike `configparser`, the same section name may appear more than once
(think of repeated `[NDBD]` blocks in a MySQL cluster config),
so the document is a multi-map: `fqn -> [IniSection, ...]`.
"""

import re
from collections.abc import Iterator, Mapping, MutableMapping
from threading import RLock

from .abstract import Renderable
from .consts import (
    CHAR_EOL, CHAR_LSBRACKET, CHAR_RSBRACKET, GLOBAL_SECTION, Delimiter
)
from .errors import InvalidPattern, SectionNotFound
from .tokenizer import parse_option

__all__ = ['IniSection', 'IniConfig']


class IniSection(Renderable, MutableMapping[str, str]):
    """An INI section: option names mapped to values, in insertion order.

    Every value is a `str`, an empty one standing for a key-only option.
    Re-adding a name overwrites the value but keeps its position;
    deleting and adding it again moves it to the end.

    The explicit methods (`value_of()`, `add()`, `delete()`) never raise
    on missing options and return `''` instead, while the mapping
    protocol (`s[k]`, `del s[k]`) raises `KeyError` as a dict would.
    """
    def __init__(self, fqn: str) -> None:
        self._fqn = fqn
        self._options: dict[str, str] = {}
        self._ordered: list[str] = []
        self._lock = RLock()

    # two sections may share name and content, yet remain different blocks.
    __eq__ = object.__eq__
    __hash__ = object.__hash__

    @property
    def name(self) -> str:
        with self._lock:
            return self._fqn

    @property
    def is_global(self) -> bool:
        return self.name == GLOBAL_SECTION

    def exists(self, option: str) -> bool:
        with self._lock:
            return option in self._options

    def value_of(self, option: str) -> str:
        """Value of `option`, or `''` if absent.

        Use `exists()` to tell an absent option from an empty one.
        """
        with self._lock:
            return self._options.get(option, '')

    def add(self, option: str, value: str = '') -> str:
        """Insert or overwrite `option`, returning the previous value."""
        with self._lock:
            if option not in self._options:
                self._ordered.append(option)
            old = self._options.get(option, '')
            self._options[option] = value
            return old

    def set_value_for(self, option: str, value: str) -> str:
        """Same upsert as `add()`: unknown options get registered too."""
        return self.add(option, value)

    def delete(self, option: str) -> str:
        """Drop `option`, returning its value (`''` if it was absent)."""
        with self._lock:
            if option not in self._options:
                return ''
            self._ordered.remove(option)
            return self._options.pop(option)

    def ingest(self, line: str) -> tuple[str, str]:
        """Tokenize a raw option line and upsert it."""
        option, value = parse_option(line)
        self.add(option, value)
        return option, value

    def option_names(self) -> list[str]:
        with self._lock:
            return self._ordered.copy()

    def to_dict(self) -> dict[str, str]:
        with self._lock:
            return {k: self._options[k] for k in self._ordered}

    def clear(self) -> None:
        with self._lock:
            self._options.clear()
            self._ordered.clear()

    def render(self, delimiter: Delimiter | None = None) -> str:
        delimiter = Delimiter.EQUAL if delimiter is None else delimiter
        with self._lock:
            parts = [] if self._fqn == GLOBAL_SECTION else [
                f'{CHAR_LSBRACKET}{self._fqn}{CHAR_RSBRACKET}{CHAR_EOL}']
            for k in self._ordered:
                v = self._options[k]
                parts.append(f'{k}{delimiter.value}{v}{CHAR_EOL}'
                             if v else f'{k}{CHAR_EOL}')
        return ''.join(parts)

    def __getitem__(self, key: str) -> str:
        with self._lock:
            return self._options[key]

    def __setitem__(self, key: str, value: str) -> None:
        self.add(key, value)

    def __delitem__(self, key: str) -> None:
        with self._lock:
            if key not in self._options:
                raise KeyError(key)
            self.delete(key)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._options

    def __len__(self) -> int:
        with self._lock:
            return len(self._ordered)

    def __iter__(self) -> Iterator[str]:
        return iter(self.option_names())

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self.name, len(self))


class IniConfig(Renderable, Mapping[str, IniSection]):
    """A whole INI document.

        ```ini
        key = val  ; before any header, see `self.ensure_global_section()`.

        [section]
        key233 = val666
        [section]  ; same name again, kept as a second block.
        key233 = val114514
        ```

    `self[fqn]` gives the *first* block of that name,
    use `sections(fqn)` for all of them.
    Lookups by pattern (`find()`, `delete()`) follow `re.search()`.
    """
    def __init__(
        self, file_path: str = '',
        delimiter: Delimiter = Delimiter.EQUAL
    ) -> None:
        self._file_path = file_path
        self._delimiter = delimiter
        self._sections: dict[str, list[IniSection]] = {}
        self._ordered: list[str] = []
        self._lock = RLock()

    @property
    def file_path(self) -> str:
        with self._lock:
            return self._file_path

    @file_path.setter
    def file_path(self, value: str) -> None:
        with self._lock:
            self._file_path = value

    @property
    def delimiter(self) -> Delimiter:
        with self._lock:
            return self._delimiter

    @delimiter.setter
    def delimiter(self, value: Delimiter) -> None:
        with self._lock:
            self._delimiter = value

    def ensure_global_section(self) -> IniSection:
        """The first global section.

        If there is none, e.g. after `delete('^global$')`, a new one is
        registered, and so comes *last* in the document order.
        """
        with self._lock:
            if GLOBAL_SECTION in self._sections:
                return self._sections[GLOBAL_SECTION][0]
            return self.add_section(GLOBAL_SECTION)

    def add_section(self, fqn: str) -> IniSection:
        """Append a new, empty block named `fqn` and return it.

        Never merges into an existing block of the same name.
        """
        section = IniSection(fqn)
        with self._lock:
            if fqn not in self._sections:
                self._sections[fqn] = []
                self._ordered.append(fqn)
            self._sections[fqn].append(section)
        return section

    def section(self, fqn: str) -> IniSection:
        with self._lock:
            if fqn not in self._sections:
                raise SectionNotFound(fqn)
            return self._sections[fqn][0]

    def sections(self, fqn: str = '') -> list[IniSection]:
        """All blocks named `fqn`, in the order they were added.

        An empty `fqn` stands for every block of the document.
        """
        with self._lock:
            if not fqn:
                return [s for i in self._ordered for s in self._sections[i]]
            if fqn not in self._sections:
                raise SectionNotFound(fqn)
            return self._sections[fqn].copy()

    def all_sections(self) -> list[IniSection]:
        return self.sections('')

    @staticmethod
    def _compile(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
        try:
            return re.compile(pattern)
        except re.error as e:
            raise InvalidPattern(str(pattern), str(e)) from e

    def find(self, pattern: str | re.Pattern[str]) -> list[IniSection]:
        """Blocks whose name matches `pattern`, in document order."""
        rx = self._compile(pattern)
        with self._lock:
            return [s for i in self._ordered if rx.search(i)
                    for s in self._sections[i]]

    def delete(self, pattern: str | re.Pattern[str]) -> list[IniSection]:
        """Remove every block whose name matches `pattern`.

        Returns the removed blocks. A bad pattern raises `InvalidPattern`
        before anything is touched.
        """
        rx = self._compile(pattern)
        with self._lock:
            matched = [i for i in self._ordered if rx.search(i)]
            removed = [s for i in matched for s in self._sections.pop(i)]
            self._ordered = [i for i in self._ordered if i not in matched]
        return removed

    def remove(self, section: IniSection) -> bool:
        """Detach one block (compared by identity).

        Its name leaves the document once no block of that name remains.
        Returns `False` if the block doesn't belong to this document.
        """
        fqn = section.name
        with self._lock:
            blocks = self._sections.get(fqn, [])
            for idx, s in enumerate(blocks):
                if s is section:
                    break
            else:
                return False
            del blocks[idx]
            if not blocks:
                del self._sections[fqn]
                self._ordered.remove(fqn)
        return True

    def string_value(self, fqn: str, option: str) -> str:
        return self.section(fqn).value_of(option)

    def render_section(
        self, fqn: str, delimiter: Delimiter | None = None
    ) -> str:
        delimiter = self.delimiter if delimiter is None else delimiter
        return ''.join(s.render(delimiter) for s in self.sections(fqn))

    def render(self, delimiter: Delimiter | None = None) -> str:
        # snapshot first, the store lock is not held while sections render.
        with self._lock:
            delimiter = self._delimiter if delimiter is None else delimiter
            blocks = self.all_sections()
        return ''.join(s.render(delimiter) for s in blocks)

    def clear(self) -> None:
        with self._lock:
            self._sections.clear()
            self._ordered.clear()

    def __getitem__(self, fqn: str) -> IniSection:
        return self.section(fqn)

    def __contains__(self, fqn: object) -> bool:
        with self._lock:
            return fqn in self._sections

    def __len__(self) -> int:
        with self._lock:
            return len(self._ordered)

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            return iter(self._ordered.copy())

    def __repr__(self) -> str:
        return '<IniConfig %r { .sections = %d }>' % (
            self.file_path, len(self.all_sections()))
