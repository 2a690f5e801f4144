"""Downloads Flickr albums into local directories."""
import logging
import os
import re

from .general import AlbumError
from .general import MIME_EXTENSIONS
from .general import VIDEO_ORIGINAL_LABEL


__all__ = ['exportAlbums', 'sanitizeName', 'mimeExtension']
logger = logging.getLogger(__name__)

# Characters not allowed in file names on common filesystems, plus space.
UNSAFE_CHARS = re.compile(r'[/\\?*:|"<> ]')


def sanitizeName(name):
	"""Replace characters which are not allowed in a file name with underscores."""
	return UNSAFE_CHARS.sub('_', name)


def mimeExtension(content_type, messenger):
	"""Returns the file extension (with the dot) for a MIME type. Unknown types get an empty
	extension and a warning.
	"""
	mime = content_type.split(';', 1)[0].strip().lower()
	ext = MIME_EXTENSIONS.get(mime)
	if ext is None:
		messenger.warning('{}: Unknown MIME type'.format(content_type))
		ext = ''
	return ext


def photoURL(flickrwrapper, photo):
	"""The URL of a photo's original content. Videos need an extra lookup of their sizes.
	"""
	if photo.media != 'video':
		if not photo.url:
			raise AlbumError('#{}: No URL is found'.format(photo.photo_id))
		return photo.url

	for s in flickrwrapper.getSizes(photo.photo_id):
		if s.label == VIDEO_ORIGINAL_LABEL:
			return s.source
	raise AlbumError('#{}: No URL is found'.format(photo.photo_id))


def albumPhotos(flickrwrapper, album_id, messenger):
	"""Lists an album and resolves the download URL of every photo.

	Returns a tuple (photos, nerr), where:
		photos - list of (PhotoEntry, url) for every photo whose URL was found
		nerr   - number of photos whose URL couldn't be found
	"""
	photos = []
	nerr = 0
	for p in flickrwrapper.listAlbum(album_id):
		try:
			photos.append((p, photoURL(flickrwrapper, p)))
		except AlbumError as e:
			messenger.error(e)
			nerr += 1
	return photos, nerr


def downloadPhoto(flickrwrapper, url, directory, title, messenger):
	"""Downloads one photo into directory, named after its title. Returns True on success.
	"""
	name = sanitizeName(title)
	try:
		content_type, content = flickrwrapper.download(url)
	except AlbumError as e:
		logger.info(e)
		messenger.error('{}: Failed to download'.format(name))
		return False

	filename = os.path.join(directory, name + mimeExtension(content_type, messenger))
	messenger.verbose('Saving file as {}'.format(filename))
	try:
		with open(filename, 'wb') as f:
			f.write(content)
	except OSError as e:
		messenger.error('{}: {}'.format(filename, e.strerror or e))
		return False
	return True


def exportAlbum(flickrwrapper, album_id, output_dir, messenger):
	"""Downloads every photo of one album into output_dir/<album title>/. Returns the number
	of errors.
	"""
	messenger.verbose('Downloading album #{}'.format(album_id))
	try:
		title = flickrwrapper.getAlbumTitle(album_id)
		photos, nerr = albumPhotos(flickrwrapper, album_id, messenger)
	except AlbumError as e:
		messenger.error(e)
		return 1

	directory = os.path.join(output_dir, sanitizeName(title))
	try:
		os.makedirs(directory, exist_ok=True)
	except OSError as e:
		messenger.error('{}: {}'.format(directory, e.strerror or e))
		return nerr + 1

	for p, url in photos:
		messenger.verbose('Downloading photo #{}'.format(p.photo_id))
		if not downloadPhoto(flickrwrapper, url, directory, p.title, messenger):
			nerr += 1
	return nerr


def exportAlbums(flickrwrapper, album_ids, output_dir, messenger):
	"""Downloads each album in turn. A failing album doesn't stop the others.

	Returns nothing. Raises an AlbumError at the end if anything failed.
	"""
	nerr = 0
	for album_id in album_ids:
		nerr += exportAlbum(flickrwrapper, album_id, output_dir, messenger)
	if nerr:
		raise AlbumError('{} error(s) while downloading albums'.format(nerr))
