"""Credential resolution from the command line, the environment, and the rc file."""
import logging
import os
import re

from .general import AlbumError

DEFAULT_RC_NAME = '.flickrrc'

# Environment variables and rc file keys, per credential field. Same rc format as flickr_upload.
ENV_NAMES = {
    'key': 'FLICKR_KEY',
    'secret': 'FLICKR_SECRET',
    'token': 'FLICKR_TOKEN',
    'token_secret': 'FLICKR_TOKEN_SECRET',
}
STORE_NAMES = {
    'key': 'key',
    'secret': 'secret',
    'token': 'auth_token',
    'token_secret': 'auth_token_secret',
}
REQUIRED_FIELDS = ('key', 'secret', 'token')

CONFIG_LINE = re.compile(r'^\s*(\w+)=(.+?)\s*$')


__all__ = ['Config', 'loadConfigStore', 'readConfig', 'rcPath']
logger = logging.getLogger(__name__)


class Config():
    """Flickr credentials. Each field is taken from, in order: the explicit argument, the
    environment, the config store.

    Args:
        key: Flickr API key.
        secret: Flickr API secret.
        token: Auth token of the account.
        token_secret: Secret paired with the auth token. (Optional)
        environ: Mapping of environment variables. Defaults to os.environ.
        store: Mapping read by readConfig(), eg. from ~/.flickrrc.
    """
    def __init__(self, key=None, secret=None, token=None, token_secret=None, environ=None,
            store=None):
        self.key = key
        self.secret = secret
        self.token = token
        self.token_secret = token_secret

        self.fillFromEnviron(os.environ if environ is None else environ)
        if store:
            self.fillFromStore(store)

    def __str__(self):
        # Never print the secrets.
        return str({f: bool(getattr(self, f)) for f in ENV_NAMES})

    def fillFromEnviron(self, environ):
        """Fills credential fields not explicitly provided from the environment."""
        for field, name in ENV_NAMES.items():
            if not getattr(self, field) and environ.get(name):
                logger.info('Filling setting "{}" from ${}.'.format(field, name))
                setattr(self, field, environ[name])

    def fillFromStore(self, store):
        """Fills credential fields still missing from the config store."""
        for field, name in STORE_NAMES.items():
            if not getattr(self, field) and store.get(name):
                logger.info('Filling setting "{}" from config store.'.format(field))
                setattr(self, field, store[name])

    def validate(self):
        """Raises an AlbumError naming every required credential that is missing."""
        missing = [f for f in REQUIRED_FIELDS if not getattr(self, f)]
        if missing:
            raise AlbumError(('Undefined value for {}. Get an API key from ' +
                    'http://www.flickr.com/services/api/keys/ .').format(', '.join(missing)))


def readConfig(path):
    """Parses an rc file of "key=value" lines into a dict. "#" starts a comment. Lines that
    aren't settings are ignored and later keys win. A missing file is an empty config.
    """
    config = {}
    if not path or not os.path.isfile(path):
        logger.debug('No config file at path={}'.format(path))
        return config

    try:
        f = open(path, encoding='utf-8')
    except OSError as e:
        raise AlbumError('{}: {}'.format(path, e.strerror or e))

    with f:
        for line in f:
            line = line.rstrip('\n').split('#', 1)[0]
            match = CONFIG_LINE.match(line)
            if match:
                config[match.group(1)] = match.group(2)
    logger.info('Read config keys {} from path={}'.format(sorted(config), path))
    return config


def rcPath(rc=None, environ=None):
    """The rc file to read: explicit path, then $FLICKR_RC, then ~/.flickrrc."""
    environ = os.environ if environ is None else environ
    if rc:
        return rc
    if environ.get('FLICKR_RC'):
        return environ['FLICKR_RC']
    return os.path.join(environ.get('HOME') or os.path.expanduser('~'), DEFAULT_RC_NAME)


def loadConfigStore(rc=None, environ=None):
    """Provides the settings of the rc file, see rcPath() for which one."""
    return readConfig(rcPath(rc, environ))
