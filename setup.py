# Copyright 2026 The spec_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Setup file for spec_harness package.

Installs the library and the ``spec-harness`` command.
"""

from setuptools import setup, find_packages

setup(
    name='spec_harness',
    version='1.0.0',
    packages=find_packages(exclude=['test', 'test.*', 'examples']),
    install_requires=['setuptools'],
    extras_require={
        'hypothesis': ['hypothesis>=6.0'],
        'test': ['pytest', 'hypothesis>=6.0'],
    },
    python_requires='>=3.8',
    zip_safe=True,
    author='John',
    author_email='john@example.com',
    maintainer='John',
    maintainer_email='john@example.com',
    description='Behavior-driven specs with nested contexts and randomized property checks',
    license='Apache-2.0',
    entry_points={
        'console_scripts': [
            'spec-harness = spec_harness.runner.cli:main',
        ],
    },
)
