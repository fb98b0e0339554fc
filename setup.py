#!/usr/bin/env python3
"""
Setup script for stickguard package.

Install in development mode:
    pip install -e .

Install with test dependencies:
    pip install -e ".[dev]"
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_path = Path(__file__).parent / "README.md"
long_description = readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""

setup(
    name="stickguard",
    version="0.1.0",
    description="Analog-stick input integrity checks for recorded competitive game sessions",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",

    # Package discovery
    packages=find_packages(include=["stickguard", "stickguard.*"]),

    # Dependencies
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.19.0",
        "pandas>=1.3.0",
        "scipy>=1.7.0",
        "pyyaml>=5.4",
    ],

    extras_require={
        "dev": [
            "pytest>=6.0",
            "black",
            "flake8",
        ],
    },

    # Classifiers for PyPI
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Games/Entertainment",
        "Topic :: Scientific/Engineering :: Information Analysis",
    ],

    # Include non-Python files
    include_package_data=True,
    package_data={
        "stickguard": ["configs/*.yaml"],
    },
)
