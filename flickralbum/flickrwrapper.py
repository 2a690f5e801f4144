"""Wrapper for the Flickr API."""
import collections
import http.client
import logging
import urllib.error
import urllib.request

import flickrapi
import flickrapi.auth

from .general import AlbumError


__all__ = ['getFlickrAPI', 'FlickrWrapper', 'PhotoEntry', 'PhotoSize']
logger = logging.getLogger(__name__)

REST_URL = 'https://api.flickr.com/services/rest/'
UPLOAD_URL = 'https://up.flickr.com/services/upload/'

# Photos per page when listing an album, the maximum Flickr allows.
PER_PAGE = 500

# Seconds to wait on a stalled download.
DOWNLOAD_TIMEOUT = 60

# Failed calls: errors reported by Flickr, and transport errors (requests exceptions are OSErrors).
API_ERRORS = (flickrapi.exceptions.FlickrError, OSError)


# A photo (or video) in an album. 'url' is the original photo URL, empty for videos.
PhotoEntry = collections.namedtuple('PhotoEntry', ['photo_id', 'title', 'media', 'url'])

# One of the sizes Flickr offers for a photo. 'source' is the URL of the content.
PhotoSize = collections.namedtuple('PhotoSize', ['label', 'source'])


def getFlickrAPI(config):
	"""Obtains the Flickr API interface, signed with the credentials in config.
	Args
		config: A validated Config object.

	Returns
		FlickrWrapper
	"""
	logger.info('Obtaining Flickr API, credentials: {}'.format(config))
	token = flickrapi.auth.FlickrAccessToken(config.token, config.token_secret or '', 'delete')
	flickr = flickrapi.FlickrAPI(config.key, config.secret, token=token, store_token=False,
			format='parsed-json')
	flickr.REST_URL = REST_URL
	flickr.UPLOAD_URL = UPLOAD_URL
	return FlickrWrapper(flickr)


def _checkStat(resp, what):
	if resp.get('stat') != 'ok':
		raise AlbumError('{}, err={}'.format(what, resp.get('message', resp.get('stat'))))


class FlickrWrapper():
	"""Wraps the FlickrAPI for the functions used here. Responses are decoded into plain values
	and every failed call raises an AlbumError.
	"""
	def __init__(self, flickr):
		self.flickr = flickr

	def getAlbumTitle(self, album_id):
		"""Get the title of an album.
		"""
		what = '#{}: Failed to get album information'.format(album_id)
		try:
			resp = self.flickr.photosets.getInfo(photoset_id=album_id)
		except API_ERRORS as e:
			raise AlbumError('{}, err={}'.format(what, e))
		_checkStat(resp, what)
		logger.debug('Album {} info: {}'.format(album_id, resp))

		title = resp.get('photoset', {}).get('title')
		if isinstance(title, dict):
			title = title.get('_content')
		if not title:
			raise AlbumError('#{}: No title is found'.format(album_id))
		return title

	def listAlbum(self, album_id):
		"""List the photos in an album, with their media type and original URL.
		"""
		# Pages are indexed from 1. Update the page count once we make an API request.
		what = '#{}: Failed to get album information'.format(album_id)
		page_num = 1
		page_count = 1
		results = []
		while page_num <= page_count:
			try:
				page = self.flickr.photosets.getPhotos(photoset_id=album_id, extras='media,url_o',
						page=page_num, per_page=PER_PAGE)
			except API_ERRORS as e:
				raise AlbumError('{}, err={}'.format(what, e))
			_checkStat(page, what)
			logger.debug('Album {} listing: {}'.format(album_id, page))
			page_count = int(page['photoset'].get('pages', 1))
			page_num += 1
			for p in page['photoset']['photo']:
				results.append(PhotoEntry(p['id'], p.get('title', ''), p.get('media', 'photo'),
						p.get('url_o', '')))
		return results

	def getSizes(self, photo_id):
		"""List the sizes available for a photo, including their URLs.
		"""
		what = '#{}: Failed to get photo information'.format(photo_id)
		try:
			resp = self.flickr.photos.getSizes(photo_id=photo_id)
		except API_ERRORS as e:
			raise AlbumError('{}, err={}'.format(what, e))
		_checkStat(resp, what)
		logger.debug('Sizes available for {}: {}'.format(photo_id, resp))
		return [PhotoSize(s.get('label', ''), s.get('source', '')) for s in resp['sizes']['size']]

	def upload(self, filename, tags=None, description=None):
		"""Upload a file synchronously. Returns the new photo ID.
		"""
		kwargs = {'async': '0'}
		if tags is not None:
			kwargs['tags'] = tags
		if description is not None:
			kwargs['description'] = description

		# The upload API only supports XML responses, so use "etree".
		logger.info('Uploading photo: ' + filename)
		try:
			resp = self.flickr.upload(filename, format='etree', **kwargs)
		except API_ERRORS as e:
			raise AlbumError('Could not upload photo "{}", err={}'.format(filename, e))

		if resp.attrib.get('stat') != 'ok':
			raise AlbumError('Could not upload photo "{}", err={}'.format(filename,
					resp.attrib.get('stat')))
		photo_id = resp.find('photoid')
		if photo_id is None or not photo_id.text:
			raise AlbumError('Could not upload photo "{}", no photo ID returned'.format(filename))
		return photo_id.text

	def createAlbum(self, title, primary_photo_id, description=None):
		"""Create a Flickr album. A primary photo is required, it becomes the first photo of the
		album.
		"""
		kwargs = {}
		if description is not None:
			kwargs['description'] = description
		what = '{}: Failed to create album'.format(title)
		try:
			resp = self.flickr.photosets.create(title=title, primary_photo_id=primary_photo_id,
					**kwargs)
		except API_ERRORS as e:
			raise AlbumError('{}, err={}'.format(what, e))
		logger.info('Creating album: ' + str(resp))
		_checkStat(resp, what)
		return resp['photoset']['id']

	def addPhoto(self, album_id, photo_id):
		"""Add a photo to an album. Returns nothing, raises AlbumError for error.
		"""
		what = '#{}: Failed to add photo'.format(photo_id)
		try:
			resp = self.flickr.photosets.addPhoto(photoset_id=album_id, photo_id=photo_id)
		except API_ERRORS as e:
			raise AlbumError('{}, err={}'.format(what, e))
		_checkStat(resp, what)

	def download(self, url):
		"""Fetches a URL. Returns a tuple (content_type, content) with the raw bytes.
		"""
		logger.info('Downloading: ' + url)
		try:
			with urllib.request.urlopen(url, timeout=DOWNLOAD_TIMEOUT) as r:
				content_type = r.headers.get('Content-Type') or ''
				content = r.read()
		except (urllib.error.URLError, OSError, http.client.HTTPException) as e:
			raise AlbumError('Failed to download {}: {}'.format(url, e))
		return content_type, content
