#!/usr/bin/env python

from setuptools import setup, find_packages
from codecs import open
from os import path

here = path.abspath(path.dirname(__file__))
with open(path.join(here, 'README.rst'), encoding='utf-8') as f:
    long_description = f.read()
with open(path.join(here, 'steamid/__init__.py'), encoding='utf-8') as f:
    __version__ = f.readline().split('"')[1]

install_requires = [
    'steam~=1.0',
]

setup(
    name='steamid-codec',
    version=__version__,
    description='Convert Steam IDs between Steam64, Steam2, Steam3, invite codes and CS:GO friend codes',
    long_description=long_description,
    author="u004",
    license='Apache-2.0',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
    ],
    keywords='valve steam steamid steam64 steam2 steam3 invite code csgo friend code',
    packages=['steamid'] + ['steamid.'+x for x in find_packages(where='steamid')],
    install_requires=install_requires,
    extras_require={
        'tests': ['pytest'],
    },
    zip_safe=True,
)
