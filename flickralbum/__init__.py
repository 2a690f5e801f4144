"""flickralbum package initialization."""

# Each module defines what it exports via __all__.
from .config import Config, loadConfigStore, readConfig, rcPath
from .exporter import exportAlbums, mimeExtension, sanitizeName
from .flickrwrapper import getFlickrAPI, FlickrWrapper
from .general import AlbumError, VERSION
from .importer import importAlbum, findFiles
from .status import Messenger
from .__main__ import cli, exportCli, importCli


__doc__ = """flickralbum moves photos and videos between a local directory and Flickr albums.

* flickralbum.Config - Flickr credentials, filled from the environment and ~/.flickrrc.
* flickralbum.exportAlbums - download albums into directories named after their titles.
* flickralbum.importAlbum - upload files and create a new album from them.
* flickralbum.Messenger - status output for both, optionally mirrored to a log file.
* flickralbum.AlbumError - the exception raised on failures.

ex: Download album 72157600000000000 into ./album/<album title>/.
config = flickralbum.Config(store=flickralbum.loadConfigStore())
config.validate()
flickralbum.exportAlbums(flickralbum.getFlickrAPI(config), ['72157600000000000'], 'album',
        flickralbum.Messenger())

ex: Upload a directory tree, in path order, as a new album named "Summer".
flickralbum.importAlbum(flickralbum.getFlickrAPI(config), 'Summer', ['/my/dir'],
        flickralbum.Messenger(verbose=True), tags=['summer', 'beach'], sort=True)
"""
