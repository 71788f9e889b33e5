# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/12 21:52:17

__all__ = [
    'IniException', 'SectionNotFound', 'InvalidPattern',
    'ReadFailure', 'WriteFailure'
]


class IniException(Exception):
    """Base of every error raised by `iniconf`."""
    pass


class SectionNotFound(IniException, KeyError):
    """The requested section name is not in the store."""
    def __init__(self, fqn: str) -> None:
        super().__init__(fqn)
        self.fqn = fqn

    def __str__(self) -> str:
        return f'unable to find {self.fqn}'


class InvalidPattern(IniException, ValueError):
    """A malformed regular expression was given to `find()`/`delete()`."""
    def __init__(self, pattern: str, reason: str = '') -> None:
        super().__init__(pattern, reason)
        self.pattern = pattern
        self.reason = reason

    def __str__(self) -> str:
        return f'invalid section pattern {self.pattern!r}: {self.reason}'


class ReadFailure(IniException):
    """To record errors when reading INI files."""
    pass


class WriteFailure(IniException):
    """To record errors when saving INI files."""
    pass
