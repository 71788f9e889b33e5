# -*- encoding: utf-8 -*-
# @File   : export.py
# @Time   : 2026/10/14 19:27:52

"""JSON and YAML views of an INI document.

Both keep the document order and repeated section names:

    ```json
    {
      "sections": [
        {"section": "global", "options": [["a", "1"]]},
        {"section": "x", "options": [["b", "2"], ["host1", ""]]}
      ]
    }
    ```
"""

import json
from os import PathLike
from typing import Any

import yaml

from .abstract import FileHandler
from .errors import ReadFailure
from .model import IniConfig

__all__ = ['IniJsonParser', 'IniYamlParser', 'to_document', 'from_document']

# JSONDecodeError and UnicodeDecodeError are ValueErrors,
# the rest come from `from_document()` on documents of the wrong shape.
_READ_ERRORS = (
    OSError, LookupError, ValueError, KeyError, TypeError, AttributeError
)


def to_document(instance: IniConfig) -> dict[str, Any]:
    return {'sections': [
        {'section': s.name, 'options': [list(i) for i in s.to_dict().items()]}
        for s in instance.all_sections()
    ]}


def from_document(
    doc: dict[str, Any], ins: IniConfig | None = None
) -> IniConfig:
    if ins is None:
        ins = IniConfig()
    for i in doc.get('sections') or []:
        this_sect = ins.add_section(str(i['section']))
        for pair in i.get('options') or []:
            # yaml may load bare digits as int, and null as None.
            k, v = (list(pair) + [''])[:2]
            this_sect.add(str(k), '' if v is None else str(v))
    return ins


class IniJsonParser(FileHandler[IniConfig]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    def read(self) -> IniConfig:
        try:
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return from_document(json.load(fp))
        except _READ_ERRORS as e:
            raise ReadFailure(f'unable to read {self._fn}: {e}') from e

    def write(self, instance: IniConfig, indent: int = 2) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            json.dump(to_document(instance), fp,
                      ensure_ascii=False, indent=indent)


class IniYamlParser(FileHandler[IniConfig]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    def read(self) -> IniConfig:
        try:
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return from_document(yaml.safe_load(fp) or {})
        except (*_READ_ERRORS, yaml.YAMLError) as e:
            raise ReadFailure(f'unable to read {self._fn}: {e}') from e

    def write(self, instance: IniConfig) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            yaml.safe_dump(to_document(instance), fp,
                           allow_unicode=True, sort_keys=False)
