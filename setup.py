#!/usr/bin/env python3
"""
Setup script for shapekit - Factory, Decorator and Strategy patterns on a small shape toolkit.
"""

import pathlib

from setuptools import find_packages, setup

# The directory containing this file
HERE = pathlib.Path(__file__).parent

# The text of the README file
README = (
    (HERE / "README.md").read_text(encoding="utf-8")
    if (HERE / "README.md").exists()
    else "Factory, Decorator and Strategy patterns on a small shape toolkit."
)

setup(
    name="shapekit",
    version="0.1.0",
    description="Factory, Decorator and Strategy patterns on a small shape toolkit",
    long_description=README,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        # Core dependencies
        "numpy>=1.20.0",
        # PNG preview
        "matplotlib>=3.5.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0.0",
            "pytest-cov>=2.10.0",
            "Pillow>=8.0.0",
            "black>=21.0.0",
            "flake8>=3.8.0",
            "mypy>=0.800",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    keywords="design patterns, factory, decorator, strategy, geometry, shapes",
    include_package_data=True,
    zip_safe=False,
    entry_points={
        "console_scripts": [
            "shapekit=shapekit.cli:main",
        ],
    },
)
