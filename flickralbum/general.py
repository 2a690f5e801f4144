"""Common definitions."""


__all__ = ['AlbumError', 'FILE_SIZE_MAX', 'MEDIA_EXTENSIONS', 'MIME_EXTENSIONS', 'VERSION',
        'VIDEO_ORIGINAL_LABEL']


VERSION = '0.1.0'  # The canonical version definition.


# Flickr rejects uploads above this size.
FILE_SIZE_MAX = 300 * 1024 * 1024

# File extensions (lowercase, without the dot) considered for upload.
MEDIA_EXTENSIONS = ('jpeg', 'jpg', 'gif', 'png', 'tiff', 'avi', 'wmv', 'mov', 'mpg', 'mpeg',
        'mp4', '3gp')

# Extension given to a downloaded file, by the Content-Type of the download.
MIME_EXTENSIONS = {
    'image/jpeg': '.jpeg',
    'image/gif': '.gif',
    'image/png': '.png',
    'image/tiff': '.tiff',
    'video/x-msvideo': '.avi',
    'video/x-ms-wmv': '.wmv',
    'video/quicktime': '.mov',
    'video/mpeg': '.mpeg',
    'video/mp4': '.mp4',
    'video/3gpp': '.3gp',
}

# Size label Flickr gives the originally uploaded video.
VIDEO_ORIGINAL_LABEL = 'Video Original'


# Custom exception class used to terminate execution.
class AlbumError(Exception):
    pass
