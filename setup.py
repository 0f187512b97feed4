#!/usr/bin/env python
"""
credaudit - Offline credential hygiene audit tool

A command-line tool that rates password strength with deterministic,
rule-based heuristics and reports credential-level findings (weak
passwords, stale rotation, non-HTTPS URLs, default usernames).
"""

import os
from setuptools import setup, find_packages

# Read the README for long description
here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

# Version
VERSION = '0.1.0'

setup(
    name='credaudit',
    version=VERSION,
    description='Offline credential hygiene audit and password strength checker',
    long_description=long_description,
    long_description_content_type='text/markdown',

    license='MIT',

    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: System Administrators',
        'Intended Audience :: Information Technology',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Security',
        'Topic :: System :: Systems Administration',
    ],

    keywords='security audit password strength credentials cwe',

    packages=find_packages(exclude=['tests', 'tests.*']),

    python_requires='>=3.10',

    install_requires=[
        'PyYAML>=6.0',
        'rich>=13.0',
    ],

    extras_require={
        'dev': [
            'pytest>=7.0',
        ],
    },

    # Entry points for CLI commands
    entry_points={
        'console_scripts': [
            'credaudit=credaudit.cli.main:main',
        ],
    },
)
