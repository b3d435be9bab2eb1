#!/usr/bin/env python

from setuptools import setup
from pdftemplate import __version__ as version

setup(
    name='pdftemplate',
    version=version,
    description='PDF object model reader for importing pages as templates',
    long_description=open("README.rst", 'rb').read().decode('Latin-1'),
    author='Patrick Maupin',
    author_email='pmaupin@gmail.com',
    platforms='Independent',
    packages=['pdftemplate', 'pdftemplate.objects'],
    license='MIT',
    python_requires='>=3.5',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
        'Topic :: Text Processing',
        'Topic :: Printing',
        'Topic :: Utilities',
    ],
    keywords='pdf xref page tree mediabox cropbox template import',
)
