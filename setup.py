#!/usr/bin/env python3
"""
Setup script for gammusms.
"""

from setuptools import setup, find_packages

setup(
    name="gammusms",
    version="0.1.0",
    description="Python library for reading SMS messages and phonebooks through Gammu",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pyserial>=3.5",
        "python-dateutil>=2.8",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "pytest-timeout>=2.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "gammusms-cli=gammusms.cli:main",
        ],
    },
)
