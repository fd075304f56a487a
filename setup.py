#!/usr/bin/env python3
"""
Setup script for the column coverage tool

This script installs the column-coverage command and its dependencies.

Usage:
    pip install .
    pip install -e ".[dev]"  # For development mode
"""

from pathlib import Path

from setuptools import find_packages, setup

# Read README if it exists
readme_file = Path(__file__).parent / "README.md"
long_description = ""
if readme_file.exists():
    long_description = readme_file.read_text()

setup(
    name="column-coverage",
    version="1.0.0",
    description="Documentation and test coverage of dbt project columns",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Data Platform Team",
    author_email="data-platform@example.com",
    url="https://github.com/example/column-coverage",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "prometheus-client>=0.19.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.3",
            "pytest-cov>=4.1.0",
            "hypothesis>=6.92.0",
            "black>=23.12.0",
            "flake8>=6.1.0",
            "mypy>=1.7.1",
        ],
        "test": [
            "pytest>=7.4.3",
            "hypothesis>=6.92.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "column-coverage=column_coverage.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
