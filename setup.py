#!/usr/bin/env python
# -*- coding: utf-8 -*-
import re

from setuptools import setup

# Get the version
version_regex = r'__version__ = ["\']([^"\']*)["\']'
with open('minicurl/__init__.py', 'r') as f:
    text = f.read()
    match = re.search(version_regex, text)

    if match:
        version = match.group(1)
    else:
        raise RuntimeError("No version number found!")


packages = [
    'minicurl',
    'minicurl.common',
]

setup(
    name='minicurl',
    version=version,
    description='A minimal command-line HTTP client',
    long_description=open('README.rst').read() + '\n\n' + open('HISTORY.rst').read(),
    author='minicurl contributors',
    packages=packages,
    package_data={'': ['README.rst', 'HISTORY.rst']},
    package_dir={'minicurl': 'minicurl'},
    include_package_data=True,
    license='MIT License',
    python_requires='>=3.6',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
    ],
    install_requires=[
        'requests>=2.20', 'rfc3986>=1.1.0',
    ],
    extras_require={
        'test': ['pytest', 'mock'],
    },
    entry_points={
        'console_scripts': [
            'minicurl = minicurl.cli:main',
        ],
    },
)
