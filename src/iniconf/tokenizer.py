# -*- encoding: utf-8 -*-
# @File   : tokenizer.py
# @Time   : 2026/10/12 22:06:41

"""Splitting raw INI lines.

No escaping or quoting at all: an option is cut at its *first* delimiter,
so values like `wsrep_provider_options = a=1;b:2` survive as they are.
"""

from .consts import CHAR_COLON, CHAR_EQUAL, CHAR_LSBRACKET, CHAR_RSBRACKET

__all__ = ['is_section', 'section_name', 'parse_option']


def is_section(line: str) -> bool:
    return line.lstrip().startswith(CHAR_LSBRACKET)


def section_name(line: str) -> str:
    """`  [ dc1.webservers ]  ` => `dc1.webservers`."""
    inner = line.strip()[1:]
    if (end := inner.rfind(CHAR_RSBRACKET)) != -1:
        inner = inner[:end]
    return inner.strip()


def parse_option(line: str) -> tuple[str, str]:
    """Split an option line into a `(name, value)` pair.

    `=` wins over `:`. Lines without any delimiter are key-only options,
    e.g. a bare host in a list of hosts, and get an empty value.
    """
    for delim in (CHAR_EQUAL, CHAR_COLON):
        if (i := line.find(delim)) != -1:
            return line[:i].strip(), line[i + 1:].strip()
    return line.strip(), ''
