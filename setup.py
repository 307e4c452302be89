#!/usr/bin/env python

import os
from setuptools import setup

def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


setup(
    name='booksgraph',
    version='0.1.0',
    description='GraphQL API for querying and adding authors and books',
    long_description=read("README.rst"),
    packages=['booksgraph', 'booksgraph.graph', 'booksgraph.graphql'],
    package_data={
        'booksgraph': ['templates/*.html'],
    },
    keywords="graphql books authors flask",
    install_requires=[
        "flask>=2.2",
        "graphql-core>=3.2,<3.3",
    ],
    extras_require={
        "test": ["pytest", "precisely"],
    },
    entry_points={
        "console_scripts": [
            "booksgraph=booksgraph.__main__:main",
        ],
    },
    license="BSD-2-Clause",
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
)
