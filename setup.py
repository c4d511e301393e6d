# File: variantcollapse/setup.py
# Location: variantcollapse/variantcollapse/setup.py
"""
Setup script for variantcollapse.

This file configures how the package is built, installed, and what
dependencies are required.
"""

import os
from setuptools import setup, find_packages

# Load version from version.py without importing the module
version = {}
with open(os.path.join("variantcollapse", "version.py")) as f:
    exec(f.read(), version)

# Read the README for the long description
this_dir = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(this_dir, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="variantcollapse",
    version=version["__version__"],
    description="Rare variant collapsing (CMC, Morris-Zeggini, Madsen-Browning) and "
    "phenotype/covariate summary headers.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "scipy",
        "pandas",
        "jinja2",
    ],
    extras_require={"test": ["pytest"]},
    include_package_data=True,
    package_data={"variantcollapse": ["config.json", "templates/*.j2"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
    ],
)
