# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/13 00:12:46

"""Reading and saving INI files.

Lines before the first `[header]` go to the global section,
blank lines are dropped, and anything else that is not a header
(comments included) is kept as an option.
Saving an existing file renames it to `<file>.bak` first.
"""

import logging
import os
from io import StringIO, TextIOBase
from os import PathLike
from warnings import warn

import chardet

from .abstract import FileHandler
from .consts import BACKUP_EXT, GLOBAL_SECTION, Delimiter
from .errors import ReadFailure, WriteFailure
from .model import IniConfig
from .tokenizer import is_section, section_name

__all__ = ['IniParser', 'read', 'write']


class IniParser(FileHandler[IniConfig]):
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str | None = None,
        delimiter: Delimiter | None = None
    ) -> None:
        super().__init__(filename)
        self._codec = encoding
        self._delimiter = delimiter

    @staticmethod
    def readstream(
        buf: TextIOBase, ins: IniConfig | None = None
    ) -> IniConfig:
        """Read a decoded text stream.

        Just call `self.read()` unless you already have the text.
        """
        if ins is None:
            ins = IniConfig()
        this_sect = ins.add_section(GLOBAL_SECTION)
        while i := buf.readline():
            if not i.strip():
                continue
            if is_section(i):
                fqn = section_name(i)
                if fqn == GLOBAL_SECTION:
                    warn(f'[{fqn}] is saved without its header '
                         'and will merge with the leading options.')
                this_sect = ins.add_section(fqn)
            else:
                this_sect.ingest(i)
        return ins

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec is None or codec['encoding'] is None \
                or codec['confidence'] < 0.8:
            logging.warning(
                f'Unsure about the encoding of {filename}, trying utf-8.')
            codec = {'encoding': 'utf-8'}
        else:
            logging.debug(f'{filename} looks like {codec["encoding"]}.')

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            buf = raw.decode('gbk')
        return StringIO(buf)

    def read(self) -> IniConfig:
        """Read the file this parser points to.

        Raises `ReadFailure` (chained to the `OSError`, `UnicodeError`
        or `LookupError` of an unknown codec)
        instead of returning a partially filled document.
        """
        ins = IniConfig(self._fn, self._delimiter or Delimiter.EQUAL)
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong, fallback to `chardet`.
            try:
                with open(self._fn, 'r', encoding=self._codec) as fp:
                    return self.readstream(fp, ins)
            except UnicodeDecodeError:
                logging.debug(f'Re-reading {self._fn} through chardet.')
                ins.clear()
                return self.readstream(self._decode_file(self._fn), ins)
        except (OSError, UnicodeError, LookupError) as e:
            raise ReadFailure(f'unable to read {self._fn}: {e}') from e

    def _backup(self) -> None:
        bak = self._fn + BACKUP_EXT
        try:
            os.replace(self._fn, bak)
        except FileNotFoundError:
            return
        except OSError as e:
            raise WriteFailure(f'unable to back up {self._fn}: {e}') from e
        logging.debug(f'Backed up {self._fn} to {bak}.')

    def write(self, instance: IniConfig) -> None:
        """Save to the file this parser points to.

        The document is rendered and encoded before the disk is touched,
        so an unknown codec or an unencodable value leaves the original
        file where it is. An existing file is kept as `<file>.bak`.
        The first error met is raised as `WriteFailure`;
        a failing `close()` never hides an earlier write error.
        """
        codec = self._codec or 'utf-8'
        text = instance.render(self._delimiter)
        try:
            text.encode(codec)
        except (LookupError, UnicodeError) as e:
            raise WriteFailure(
                f'unable to encode {self._fn} as {codec}: {e}') from e
        self._backup()
        try:
            fp = open(self._fn, 'w', encoding=codec)
        except (OSError, LookupError) as e:
            raise WriteFailure(f'unable to create {self._fn}: {e}') from e

        first: Exception | None = None
        try:
            fp.write(text)
            fp.flush()
        except (OSError, UnicodeError) as e:
            first = e
        finally:
            try:
                fp.close()
            except (OSError, UnicodeError) as e:
                first = first or e
        if first is not None:
            raise WriteFailure(f'unable to write {self._fn}: {first}') \
                from first

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f" ({self._codec})"


def read(
    filename: str | PathLike[str], encoding: str | None = None
) -> IniConfig:
    return IniParser(filename, encoding).read()


def write(
    instance: IniConfig,
    filename: str | PathLike[str] | None = None,
    delimiter: Delimiter | None = None,
    encoding: str | None = None
) -> None:
    """Save `instance`, by default back to where it was read from."""
    if filename is None:
        filename = instance.file_path
    if not filename:
        raise WriteFailure('no file path to save the document to')
    IniParser(filename, encoding, delimiter).write(instance)
