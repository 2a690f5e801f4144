#!/usr/bin/env python3

import argparse
import logging
import sys

import flickrapi
from .config import Config
from .config import loadConfigStore
from .exporter import exportAlbums
from .flickrwrapper import getFlickrAPI
from .general import AlbumError
from .general import VERSION
from .importer import importAlbum
from .status import Messenger


class ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, '{}: error: {}\n'.format(self.prog, message))


def addCommonArgs(parser):
    """Arguments shared by the export and import commands."""
    parser.add_argument('--key', type=str,
            help='Flickr API key. Defaults to $FLICKR_KEY, then "key" in the rc file.')

    parser.add_argument('--secret', type=str,
            help='Flickr API secret. Defaults to $FLICKR_SECRET, then "secret" in the rc file.')

    parser.add_argument('--token', type=str,
            help='Auth token. Defaults to $FLICKR_TOKEN, then "auth_token" in the rc file.')

    parser.add_argument('--token-secret', dest='token_secret', type=str,
            help='Secret of the auth token, if it has one. Defaults to $FLICKR_TOKEN_SECRET, ' +
            'then "auth_token_secret" in the rc file.')

    parser.add_argument('--rc', metavar='FILE', type=str,
            help='Read FILE as rc file. Defaults to $FLICKR_RC, then ~/.flickrrc. The format ' +
            'is "name=value" lines, the same as flickr_upload\'s.')

    parser.add_argument('-l', '--log', metavar='FILE', type=str,
            help='Append all output to FILE.')

    parser.add_argument('--verbose', action='store_true',
            help='Print verbosely.')

    parser.add_argument('--loglevel', action='store', choices=['NOTSET', 'DEBUG', 'INFO',
            'WARNING', 'ERROR'], default='NOTSET',
            help='Verbosity of diagnostic logs on stderr. NOTSET produces no logs.')

    parser.add_argument('--version', action='version', version='%(prog)s ' + VERSION)


def exportParser(prog):
    parser = ArgumentParser(prog=prog, description='Download Flickr albums (photosets). ' +
            'Files are saved into DIR/ALBUM_TITLE.')
    addCommonArgs(parser)

    parser.add_argument('-o', '--output', metavar='DIR', default='album', type=str,
            help='Save files into DIR. (default: %(default)s)')

    parser.add_argument('photoset_ids', metavar='PHOTOSET_ID', nargs='+',
            help='ID of an album to download.')
    return parser


def importParser(prog):
    parser = ArgumentParser(prog=prog, description='Upload photos and create a new Flickr ' +
            'album entitled TITLE from them. Directories are uploaded recursively. The first ' +
            'file uploaded becomes the primary photo of the album.')
    addCommonArgs(parser)

    parser.add_argument('-d', '--description', metavar='DESC', type=str,
            help='Use DESC as the description of both the album and the photos.')

    parser.add_argument('-t', '--tag', dest='tags', metavar='TAG', action='append',
            help='Apply TAG to the photos. Can be given multiple times.')

    parser.add_argument('-s', '--sort', action='store_true',
            help='Upload files in ascending order of file path.')

    parser.add_argument('-k', '--keep-going', dest='keep_going', action='store_true',
            help="Don't fail when a file can't be uploaded, create the album from the rest.")

    parser.add_argument('title', metavar='TITLE', help='Title of the new album.')

    parser.add_argument('paths', metavar='PATH', nargs='+',
            help='File or directory to upload.')
    return parser


def setup(args):
    """Sets up the logs and credentials shared by both commands. Returns a tuple
    (messenger, flickrwrapper). Exits on configuration errors.
    """
    messenger = Messenger(log_file=args.log, verbose=args.verbose)

    # Diagnostic logs for this package and the flickrapi dependency.
    if args.loglevel != 'NOTSET':
        logging.basicConfig(stream=sys.stderr)
        logging.getLogger('flickralbum').setLevel(args.loglevel)
        flickrapi.set_log_level(args.loglevel)

    try:
        config = Config(args.key, args.secret, args.token, args.token_secret,
                store=loadConfigStore(rc=args.rc))
        config.validate()
        flickrwrapper = getFlickrAPI(config)
    except AlbumError as e:
        messenger.errorExit(1, e)
    return messenger, flickrwrapper


def runExport(args):
    messenger, flickrwrapper = setup(args)
    try:
        messenger.verbose('Downloading albums')
        exportAlbums(flickrwrapper, args.photoset_ids, args.output, messenger)
    except AlbumError as e:
        messenger.errorExit(1, e)
    messenger.verbose('Completed!')


def runImport(args):
    messenger, flickrwrapper = setup(args)
    try:
        importAlbum(flickrwrapper, args.title, args.paths, messenger,
                description=args.description,
                tags=args.tags,
                sort=args.sort,
                keep_going=args.keep_going,
        )
    except AlbumError as e:
        messenger.errorExit(1, e)
    messenger.verbose('Completed!')


def exportCli(argv=None, prog='flickr-album-export'):
    runExport(exportParser(prog=prog).parse_args(argv))


def importCli(argv=None, prog='flickr-album-import'):
    runImport(importParser(prog=prog).parse_args(argv))


COMMANDS = {
    'export': exportCli,
    'import': importCli,
}


def cli(argv=None):
    """Entry point for "python -m flickralbum {export,import} ..."."""
    argv = sys.argv[1:] if argv is None else argv
    if not argv or argv[0] not in COMMANDS:
        parser = ArgumentParser(prog='flickralbum', usage='%(prog)s {export,import} ...')
        parser.error('choose a command: export or import')
    COMMANDS[argv[0]](argv[1:], prog='flickralbum ' + argv[0])


if __name__ == '__main__':
    cli()
