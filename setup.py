#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
propconv
~~~~~~~~

Setup script for the propconv package.

"""

import os

from setuptools import find_packages, setup

here = os.path.abspath(os.path.dirname(__file__))

version = {}
with open(os.path.join(here, "propconv", "_version.py"), "r", encoding="utf-8") as version_file:
    exec(version_file.read(), version)

setup(
    name="propconv",
    version=version["__version__"],
    description="Converters of configuration values into typed objects like colors, enums and periods",
    packages=find_packages(include=["propconv", "propconv.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "pandas",
        "python-dateutil",
        "tomli; python_version < '3.11'",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
