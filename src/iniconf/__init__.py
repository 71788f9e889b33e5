# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 21:38:26

from .consts import BACKUP_EXT, GLOBAL_SECTION, Delimiter
from .errors import (
    IniException, InvalidPattern, ReadFailure, SectionNotFound, WriteFailure
)
from .export import IniJsonParser, IniYamlParser
from .model import IniConfig, IniSection
from .parser import IniParser, read, write

__all__ = [
    'IniConfig', 'IniSection', 'IniParser', 'read', 'write',
    'IniJsonParser', 'IniYamlParser',
    'Delimiter', 'GLOBAL_SECTION', 'BACKUP_EXT',
    'IniException', 'SectionNotFound', 'InvalidPattern',
    'ReadFailure', 'WriteFailure'
]
