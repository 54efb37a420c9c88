#!/usr/bin/env python3
"""
yardtypes
Parse documentation type annotations and describe them in plain English.
"""

from setuptools import setup, find_packages
import os
import re
import sys

# Ensure Python 3.8+
if sys.version_info < (3, 8):
    raise RuntimeError("yardtypes requires Python 3.8 or later")

# Read version from __init__.py without importing the package
here = os.path.abspath(os.path.dirname(__file__))
version_file = os.path.join(here, "yardtypes", "__init__.py")
with open(version_file, encoding="utf-8") as f:
    version = re.search(r'^__version__ = "([^"]+)"', f.read(), re.MULTILINE).group(1)

# Read README
readme_file = os.path.join(here, "README.md")
with open(readme_file, "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="yardtypes",
    version=version,
    description="Parse documentation type annotations and render them as English",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="xwest",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "click>=8.1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "black>=23.3.0",
            "flake8>=6.0.0",
            "mypy>=1.4.0",
            "isort>=5.12.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "yardtypes=yardtypes.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Documentation",
        "Topic :: Software Development :: Documentation",
        "Topic :: Text Processing :: Linguistic",
    ],
    keywords=["documentation", "type-annotations", "parser", "yard"],
    zip_safe=False,
    platforms=["Windows", "Linux", "macOS"],
)
