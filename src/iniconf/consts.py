# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/12 21:40:05

from enum import Enum

GLOBAL_SECTION = 'global'
BACKUP_EXT = '.bak'

CHAR_EQUAL = '='
CHAR_COLON = ':'
CHAR_LSBRACKET = '['
CHAR_RSBRACKET = ']'
CHAR_EOL = '\n'


class Delimiter(str, Enum):
    """How option names are joined with values when rendering."""
    EQUAL = f' {CHAR_EQUAL} '
    COLON = f' {CHAR_COLON} '

    @classmethod
    def of(cls, char: str) -> 'Delimiter':
        # accepts both the bare char ('=') and the padded form (' = ').
        for i in cls:
            if char.strip() == i.value.strip():
                return i
        raise ValueError(f'unsupported delimiter: {char!r}')
