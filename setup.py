#!/usr/bin/env python

#----------------------------------------------------------------------------------------------------------------------------------

# standards
import setuptools
from os import path

#----------------------------------------------------------------------------------------------------------------------------------

with open(path.join(path.dirname(__file__), 'README.md'), 'rb') as file_in:
    long_description = file_in.read().decode('UTF-8')

setuptools.setup(
    name='dofrate',
    version='0.1.0',
    description='Caches the DOF exchange rate and serves it over HTTP',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(exclude=('tests', 'tests.*')),
    python_requires='>=3.7',
    entry_points={
        'console_scripts': [
            'dofrate = dofrate.cli:main',
        ],
    },
    install_requires=[
        'flask>=2.2',
        'requests>=2',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP :: HTTP Servers',
        'Topic :: Office/Business :: Financial',
    ],
)

#----------------------------------------------------------------------------------------------------------------------------------
