"""Uploads local photos and videos into a new Flickr album."""
import logging
import os
import re

from .general import AlbumError
from .general import FILE_SIZE_MAX
from .general import MEDIA_EXTENSIONS


__all__ = ['importAlbum', 'findFiles']
logger = logging.getLogger(__name__)

MEDIA_FILE = re.compile(r'\.({})$'.format('|'.join(MEDIA_EXTENSIONS)), re.IGNORECASE)


def isMediaFile(filename):
	return MEDIA_FILE.search(filename) is not None


def findFiles(paths, messenger):
	"""Collects the photo and video files under each path, recursively. A path naming a file
	is taken as is.

	Returns a tuple (files, nerr), where nerr counts the paths that don't exist.
	"""
	files = []
	nerr = 0
	for path in paths:
		if not os.path.exists(path):
			messenger.error('{}: No such file or directory'.format(path))
			nerr += 1
			continue

		if os.path.isfile(path):
			if isMediaFile(os.path.basename(path)):
				files.append(path)
			continue

		# os.walk ordering is whatever the filesystem gives, use --sort for a fixed order.
		for dirpath, _, filenames in os.walk(path):
			for name in filenames:
				f = os.path.join(dirpath, name)
				if isMediaFile(name) and os.path.isfile(f):
					files.append(f)
	logger.info('Found files: ' + str(files))
	return files, nerr


def uploadFile(flickrwrapper, filename, messenger, tags=None, description=None):
	"""Uploads one file, retrying once if the upload fails. Returns the photo ID, or None if the
	file wasn't uploaded.
	"""
	if os.path.getsize(filename) > FILE_SIZE_MAX:
		messenger.error('{}: Size too large'.format(filename))
		return None

	try:
		return flickrwrapper.upload(filename, tags=tags, description=description)
	except AlbumError as e:
		logger.info(e)
		messenger.verbose('Try again')

	try:
		return flickrwrapper.upload(filename, tags=tags, description=description)
	except AlbumError as e:
		logger.info(e)
		messenger.error('{}: Failed to upload'.format(filename))
		return None


def uploadPhotos(flickrwrapper, files, messenger, tags=None, description=None,
		keep_going=False):
	"""Uploads the files in order.

	Returns a tuple (photo_ids, nerr), where:
		photo_ids - IDs of the uploaded photos, in upload order
		nerr      - number of failed files, always 0 with keep_going
	"""
	photo_ids = []
	nerr = 0
	for f in files:
		messenger.verbose('Uploading {}'.format(f))
		photo_id = uploadFile(flickrwrapper, f, messenger, tags=tags, description=description)
		if photo_id is None:
			if not keep_going:
				nerr += 1
			continue
		messenger.verbose('{} is uploaded as #{}'.format(f, photo_id))
		photo_ids.append(photo_id)
	return photo_ids, nerr


def addPhotos(flickrwrapper, album_id, photo_ids, messenger):
	"""Adds photos to an album. Returns the number of photos that couldn't be added."""
	nerr = 0
	for p in photo_ids:
		messenger.verbose('Adding photo #{}'.format(p))
		try:
			flickrwrapper.addPhoto(album_id, p)
		except AlbumError as e:
			logger.info(e)
			messenger.error('#{}: Failed to add photo'.format(p))
			nerr += 1
	return nerr


def importAlbum(flickrwrapper, title, paths, messenger, description=None, tags=None,
		sort=False, keep_going=False):
	"""Uploads the photos found under paths and creates an album entitled title from them. The
	first uploaded photo is the album's primary photo.

	Args:
		flickrwrapper: FlickrWrapper API object.
		title: Title of the new album.
		paths: Files and directories to upload from.
		messenger: Messenger for status output.
		description: Description of both the album and the photos. (Optional)
		tags: List of tags applied to the photos. (Optional)
		sort: Upload in ascending order of file path.
		keep_going: Don't count failed uploads as errors.

	Returns the new album's ID. Raises an AlbumError on failure.
	"""
	tag_str = ' '.join(tags) if tags else None

	messenger.verbose('Finding target files')
	files, nerr = findFiles(paths, messenger)
	if nerr:
		raise AlbumError('{} path(s) not found'.format(nerr))

	if sort:
		files = sorted(files)

	messenger.verbose('Uploading photos')
	photo_ids, nerr = uploadPhotos(flickrwrapper, files, messenger, tags=tag_str,
			description=description, keep_going=keep_going)
	if nerr:
		raise AlbumError('{} file(s) failed to upload'.format(nerr))
	if not photo_ids:
		raise AlbumError('No photos were uploaded')

	primary = photo_ids.pop(0)

	messenger.verbose("Creating album '{}' with #{}".format(title, primary))
	album_id = flickrwrapper.createAlbum(title, primary, description=description)

	messenger.verbose('Adding photos')
	nerr = addPhotos(flickrwrapper, album_id, photo_ids, messenger)
	if nerr:
		raise AlbumError('{} photo(s) could not be added to album #{}'.format(nerr, album_id))
	return album_id
