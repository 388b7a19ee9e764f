from __future__ import annotations

import argparse
import getpass
import logging
import os
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .backup import writeBackup
from .config import BACKUP_PASSWORD_ENV, LOG_LEVEL_ENV
from .detectors import DETECTORS, getDetector
from .errors import MigrationError
from .export import toJson, toOtpauthUri
from .extractor import decodeUri, decodeUriFile
from .image import fromImage
from .log import setupLogging

log = logging.getLogger('otpmigrate')


def buildParser():
    p = argparse.ArgumentParser(
        prog='otpmigrate',
        description='Extract OTP accounts from Google Authenticator migration exports.',
    )
    p.add_argument('--log-level', default=None, help=f'CRITICAL|ERROR|WARNING|INFO|DEBUG (or env {LOG_LEVEL_ENV})')
    p.add_argument('--format', choices=('table', 'json', 'uri'), default='table', help='output format')
    p.add_argument('--backup', metavar='PATH', default=None,
                   help=f'also write an encrypted backup (password from env {BACKUP_PASSWORD_ENV} or prompt)')
    sub = p.add_subparsers(dest='cmd', required=True)

    pUri = sub.add_parser('uri', help='decode otpauth-migration:// URIs')
    pUri.add_argument('uris', nargs='+', metavar='URI')

    pFile = sub.add_parser('file', help='decode a text file with one URI per line')
    pFile.add_argument('path')

    pImg = sub.add_parser('image', help='decode QR code images, one migration code per image')
    pImg.add_argument('paths', nargs='+', metavar='PATH')
    pImg.add_argument('--detector', choices=sorted(DETECTORS), default=None, help='QR backend')
    return p


def collectRecords(args):
    records = []
    if args.cmd == 'uri':
        for uri in args.uris:
            records.extend(decodeUri(uri))
    elif args.cmd == 'file':
        records.extend(decodeUriFile(args.path))
    elif args.cmd == 'image':
        detector = getDetector(args.detector)
        for path in args.paths:
            found = fromImage(path, detector)
            log.info('%s: %d account(s)', path, len(found))
            records.extend(found)
    return records


def renderTable(records):
    table = Table(title=f'{len(records)} account(s)')
    for col in ('#', 'Issuer', 'Name', 'Secret', 'Type', 'Algorithm', 'Digits', 'Counter'):
        table.add_column(col)
    for i, r in enumerate(records, 1):
        table.add_row(
            str(i), escape(r.issuer), escape(r.name), r.secret, r.otpType.name,
            r.algorithm.name, r.digits.name, '' if r.counter is None else str(r.counter),
        )
    return table


def backupPassword():
    password = os.environ.get(BACKUP_PASSWORD_ENV)
    if password:
        return password
    return getpass.getpass('Backup password: ')


def main(argv=None) -> int:
    args = buildParser().parse_args(argv)
    setupLogging(args.log_level)
    err = Console(stderr=True)

    try:
        records = collectRecords(args)
        if args.format == 'json':
            sys.stdout.write(toJson(records) + '\n')
        elif args.format == 'uri':
            sys.stdout.write(''.join(toOtpauthUri(r) + '\n' for r in records))
        else:
            Console().print(renderTable(records))
        if args.backup:
            writeBackup(records, args.backup, backupPassword())
            log.info('backup written to %s', args.backup)
    except MigrationError as e:
        err.print(f'[red]error[/red] ({e.kind}): {escape(str(e))}')
        return 1
    except OSError as e:
        err.print(f'[red]error[/red]: {escape(str(e))}')
        return 1
    return 0
