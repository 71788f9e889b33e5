# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/10/12 22:15:30

from abc import ABCMeta, abstractmethod
from os import PathLike, fspath
from os.path import normpath
from typing import Generic, TypeVar

from .consts import Delimiter

T = TypeVar('T')


class Renderable(metaclass=ABCMeta):
    """Anything that can be turned back into INI text."""
    @abstractmethod
    def render(self, delimiter: Delimiter | None = None) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()


class FileHandler(Generic[T], metaclass=ABCMeta):
    def __init__(self, filename: str | PathLike[str]) -> None:
        self._fn = normpath(fspath(filename))

    @property
    def filename(self) -> str:
        return self._fn

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
