# -*- encoding: utf-8 -*-
# @File   : cli.py
# @Time   : 2026/10/15 23:04:19

"""Command line front end.

    iniconf show config.ini -s "MYSQLD DEFAULT"
    iniconf set config.ini "MYSQLD DEFAULT" TotalSendBufferMemory 256M
    iniconf delete config.ini "^NDB_MGMD"
"""

import logging
import sys
from argparse import ArgumentParser, Namespace
from collections.abc import Iterable, Sequence

from .consts import Delimiter
from .errors import IniException, SectionNotFound
from .export import IniJsonParser, IniYamlParser
from .model import IniConfig, IniSection
from .parser import IniParser

__all__ = ['build_parser', 'main']


def _print_sections(cfg: IniConfig, sections: Iterable[IniSection]) -> None:
    for i in sections:
        sys.stdout.write(i.render(cfg.delimiter))


def _cmd_show(cfg: IniConfig, args: Namespace) -> None:
    if args.section is None:
        sys.stdout.write(cfg.render())
    else:
        sys.stdout.write(cfg.render_section(args.section))


def _cmd_get(cfg: IniConfig, args: Namespace) -> None:
    section = cfg.section(args.section)
    if not section.exists(args.option):
        logging.warning(f'[{args.section}] has no option "{args.option}".')
    print(section.value_of(args.option))


def _cmd_set(cfg: IniConfig, args: Namespace) -> None:
    try:
        section = cfg.section(args.section)
    except SectionNotFound:
        logging.info(f'Adding new section [{args.section}].')
        section = cfg.add_section(args.section)
    old = section.set_value_for(args.option, args.value)
    logging.info(f'[{args.section}] {args.option}: "{old}" -> "{args.value}"')
    args.handler.write(cfg)


def _cmd_find(cfg: IniConfig, args: Namespace) -> None:
    _print_sections(cfg, cfg.find(args.pattern))


def _cmd_delete(cfg: IniConfig, args: Namespace) -> None:
    removed = cfg.delete(args.pattern)
    if not removed:
        logging.info(f'Nothing matches "{args.pattern}".')
        return
    args.handler.write(cfg)
    _print_sections(cfg, removed)


def _cmd_export(cfg: IniConfig, args: Namespace) -> None:
    exporter = (IniYamlParser if args.format == 'yaml'
                else IniJsonParser)(args.output)
    exporter.write(cfg)
    logging.info(f'Exported {args.file} to {exporter}.')


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog='iniconf',
        description='Query and edit ordered INI configuration files.')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log debug messages')
    parser.add_argument('--delimiter', choices=['=', ':'], default='=',
                        help='delimiter used when saving (default: "=")')
    parser.add_argument('--encoding', default=None,
                        help='file encoding (default: system, then guess)')
    commands = parser.add_subparsers(dest='command', required=True)

    cmd = commands.add_parser('show', help='print the document')
    cmd.add_argument('file')
    cmd.add_argument('-s', '--section', default=None,
                     help='only the blocks with this exact name')
    cmd.set_defaults(func=_cmd_show)

    cmd = commands.add_parser('get', help='print the value of an option')
    cmd.add_argument('file')
    cmd.add_argument('section')
    cmd.add_argument('option')
    cmd.set_defaults(func=_cmd_get)

    cmd = commands.add_parser('set', help='set an option and save')
    cmd.add_argument('file')
    cmd.add_argument('section')
    cmd.add_argument('option')
    cmd.add_argument('value', nargs='?', default='')
    cmd.set_defaults(func=_cmd_set)

    cmd = commands.add_parser('find', help='print sections matching a regex')
    cmd.add_argument('file')
    cmd.add_argument('pattern')
    cmd.set_defaults(func=_cmd_find)

    cmd = commands.add_parser(
        'delete', help='delete sections matching a regex and save')
    cmd.add_argument('file')
    cmd.add_argument('pattern')
    cmd.set_defaults(func=_cmd_delete)

    cmd = commands.add_parser('export', help='convert to JSON or YAML')
    cmd.add_argument('file')
    cmd.add_argument('output')
    cmd.add_argument('--format', choices=['json', 'yaml'], default='json')
    cmd.set_defaults(func=_cmd_export)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='[%(asctime)s] %(levelname)s: %(message)s')

    args.handler = IniParser(
        args.file, args.encoding, Delimiter.of(args.delimiter))
    try:
        cfg = args.handler.read()
        args.func(cfg, args)
    except IniException as e:
        logging.error(e)
        return 1
    except OSError as e:
        logging.error(f'{args.command} failed: {e}')
        return 1
    return 0
