import os
import unittest
from unittest import mock

import pyfakefs.fake_filesystem_unittest

# Offically exported names.
from flickralbum import AlbumError
from flickralbum import Config
from flickralbum import loadConfigStore
from flickralbum import rcPath
from flickralbum import readConfig


flat_store = """a=1
# comment
b=2 # trailing comment
  c=3
"""

store = {
    'key': 'store_key',
    'secret': 'store_secret',
    'auth_token': 'store_token',
}

environ = {
    'FLICKR_KEY': 'env_key',
    'FLICKR_SECRET': 'env_secret',
    'FLICKR_TOKEN': 'env_token',
}


class TestReadConfig(pyfakefs.fake_filesystem_unittest.TestCase):
    def setUp(self):
        self.setUpPyfakefs()

    def testParse(self):
        self.fs.create_file('/home/me/.flickrrc', contents=flat_store)
        self.assertEqual(readConfig('/home/me/.flickrrc'), {'a': '1', 'b': '2', 'c': '3'})

    def testIgnoredLines(self):
        self.fs.create_file('/rc', contents='no equals sign\n=novalue\nkey=\n' +
                'dash-key=1\n# key=commented\nspaced = 1\n')
        self.assertEqual(readConfig('/rc'), {})

    def testLastKeyWins(self):
        self.fs.create_file('/rc', contents='key=first\nkey=second\n')
        self.assertEqual(readConfig('/rc'), {'key': 'second'})

    def testValueKeepsInnerEquals(self):
        self.fs.create_file('/rc', contents='auth_token=abc=def  \n')
        self.assertEqual(readConfig('/rc'), {'auth_token': 'abc=def'})

    def testMissingFile(self):
        self.assertEqual(readConfig('/no/such/file'), {})
        self.assertEqual(readConfig(None), {})

    def testDirectoryIsNotAFile(self):
        self.fs.create_dir('/rcdir')
        self.assertEqual(readConfig('/rcdir'), {})

    def testUnreadableFile(self):
        self.fs.create_file('/rc', contents='key=abc\n')
        with mock.patch('flickralbum.config.open', create=True,
                side_effect=PermissionError(13, 'Permission denied')):
            self.assertRaises(AlbumError, readConfig, '/rc')

    def testLoadConfigStore(self):
        self.fs.create_file('/custom/rc', contents='key=custom\n')
        self.fs.create_file('/env/rc', contents='key=env\n')
        self.fs.create_file('/home/me/.flickrrc', contents='key=home\n')
        env = {'HOME': '/home/me', 'FLICKR_RC': '/env/rc'}

        self.assertEqual(loadConfigStore(rc='/custom/rc', environ=env), {'key': 'custom'})
        self.assertEqual(loadConfigStore(environ=env), {'key': 'env'})
        self.assertEqual(loadConfigStore(environ={'HOME': '/home/me'}), {'key': 'home'})


class TestRcPath(unittest.TestCase):
    def testPrecedence(self):
        env = {'HOME': '/home/me', 'FLICKR_RC': '/env/rc'}
        self.assertEqual(rcPath('/cli/rc', env), '/cli/rc')
        self.assertEqual(rcPath(None, env), '/env/rc')
        self.assertEqual(rcPath(None, {'HOME': '/home/me'}), os.path.join('/home/me', '.flickrrc'))


class TestConfig(unittest.TestCase):
    def testExplicitWins(self):
        c = Config('cli_key', 'cli_secret', 'cli_token', environ=environ, store=store)
        self.assertEqual((c.key, c.secret, c.token), ('cli_key', 'cli_secret', 'cli_token'))

    def testEnvironmentOverStore(self):
        c = Config(environ=environ, store=store)
        self.assertEqual((c.key, c.secret, c.token), ('env_key', 'env_secret', 'env_token'))

    def testStore(self):
        c = Config(environ={}, store=store)
        self.assertEqual((c.key, c.secret, c.token), ('store_key', 'store_secret', 'store_token'))

    def testMixedSources(self):
        c = Config(key='cli_key', environ={'FLICKR_SECRET': 'env_secret'}, store=store)
        self.assertEqual((c.key, c.secret, c.token), ('cli_key', 'env_secret', 'store_token'))

    def testEmptyValuesAreMissing(self):
        c = Config(key='', environ={'FLICKR_KEY': ''}, store=store)
        self.assertEqual(c.key, 'store_key')

    def testTokenSecret(self):
        c = Config(environ={'FLICKR_TOKEN_SECRET': 'env_ts'}, store={'auth_token_secret': 'ts'})
        self.assertEqual(c.token_secret, 'env_ts')
        c = Config(environ={}, store={'auth_token_secret': 'ts'})
        self.assertEqual(c.token_secret, 'ts')

    def testValid(self):
        testCases = [
            Config('k', 's', 't', environ={}),
            Config(environ=environ),
            Config(environ={}, store=store),
        ]

        for t in testCases:
            try:
                t.validate()
            except Exception as e:
                self.fail('Config.validate({}) raised exception "{}"'.format(t, e))

    def testInvalid(self):
        testCases = [
            Config(environ={}),
            Config('k', 's', environ={}),
            Config(secret='s', token='t', environ={}),
            Config('k', token='t', environ={}, store={'key': 'k'}),
        ]

        for t in testCases:
            self.assertRaises(AlbumError, t.validate)

    def testMissingNamed(self):
        with self.assertRaises(AlbumError) as cm:
            Config('k', environ={}).validate()
        self.assertIn('secret, token', str(cm.exception))

    def testStrHidesSecrets(self):
        self.assertNotIn('cli_secret', str(Config('k', 'cli_secret', 't', environ={})))


if __name__ == '__main__':
    unittest.main()
