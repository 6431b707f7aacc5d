#!/usr/bin/env python3
"""
Setup script for SqlPatterns.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text() if readme_file.exists() else ""

setup(
    name="sqlpatterns",
    version="0.1.0",
    description="Translate SQL LIKE and SIMILAR TO patterns to Python regular expressions",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="SqlPatterns Contributors",
    packages=find_packages(include=["sqlpatterns", "sqlpatterns.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "click>=8.1.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "hypothesis>=6.100.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "sqlpat=sqlpatterns.cli.__main__:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Database",
        "Topic :: Text Processing :: General",
    ],
    keywords="sql like similar regex pattern translation",
)
