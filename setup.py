from setuptools import setup


with open('README.md', encoding='utf-8') as f:
    readme = f.read()

with open('requirements.txt') as f:
    # Basic functionality requires all the listed dependencies.
    install_req = f.read().split()

setup(
    name = 'flickralbum',
    version = '0.1.0',  # Keep in sync with flickralbum.VERSION.
    packages = ['flickralbum'],
    description = 'Exports Flickr albums to local directories and imports directories as new albums',
    long_description = readme,
    long_description_content_type = 'text/markdown',
    keywords = 'flickr album photoset upload download backup photo video',
    python_requires = '>=3.6',
    install_requires = install_req,
    extras_require = {
        'test': ['pytest', 'pyfakefs', 'requests'],
    },
    entry_points = {
        "console_scripts": [
            "flickr-album-export=flickralbum:exportCli",
            "flickr-album-import=flickralbum:importCli",
        ]
    },
)
