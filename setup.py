#!/usr/bin/env python3

import pathlib

from setuptools import find_packages, setup

# The directory containing this file
HERE = pathlib.Path(__file__).parent

# The text of the README file
README = (HERE / "README.md").read_text()

# Version
__version__ = "0.1.0"

setup(
    name="loopstrength",
    version=__version__,
    author="LoopStrength Development Team",
    description="Differential chromatin loop strength against a random-loop null distribution",
    long_description=README,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        # Core scientific computing
        "numpy>=1.20.0",
        "pandas>=1.5.0",
        # Visualization
        "matplotlib>=3.4.0",
        "seaborn>=0.11.0",
        # Statistical analysis
        "statsmodels>=0.13.0",
        # Configuration and utilities
        "pyyaml>=6.0",
        "click>=8.0.0",
        "colorlog>=6.6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
        "dev": [
            "black>=22.0.0",
            "isort>=5.10.0",
            "flake8>=5.0.0",
            "mypy>=0.991",
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "loopstrength=loopstrength.cli:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
    keywords=[
        "Hi-C",
        "chromatin",
        "loops",
        "3D-genomics",
        "bioinformatics",
        "differential-analysis",
        "empirical-p-value",
        "volcano-plot",
    ],
)
