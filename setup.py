#!/usr/bin/env python

from setuptools import setup

setup(name='chordsight',
      version='1.0',
      description='A python library for recognising and ranking chord names from sets of held notes',
      install_requires=['numpy'],
      extras_require={
        'test': [ 'pytest' ],
      },
      packages=['chordsight', 'chordsight.config', 'chordsight.test'],
      package_dir = {'chordsight': 'src'}
     )
