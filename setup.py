#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: setup.py
# Description: 
# Created: 2025-04-28 14:40:57
# Modified: 2025-06-02 11:35:20

from setuptools import setup, find_packages
from pathlib import Path

here = Path(__file__).parent

def read_requirements():
    return [
        line.strip()
        for line in (here / "requirements.txt").read_text().splitlines()
        if line and not line.startswith("#")
    ]

def get_version():
    version_file = here / "textlens" / "__version__.py"
    version_ns = {}
    exec(version_file.read_text(), version_ns)
    return version_ns["__version__"]

setup(
    name="textlens",
    version=get_version(),
    description="Text analysis toolkit: counts, keyword density, extraction, whitespace and diffs.",
    long_description=(here / "README.md").read_text(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["textlens", "textlens.*"]),
    install_requires=read_requirements(),
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "textlens = textlens.cli:main",
        ],
    },
    include_package_data=True,
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
