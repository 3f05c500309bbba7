"""Setup configuration for the senvec package."""

import os
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

# Read version from package
version_file = os.path.join(os.path.dirname(__file__), "senvec", "__init__.py")
with open(version_file) as f:
    for line in f:
        if line.startswith("__version__"):
            version = line.split("=")[1].strip().strip('"').strip("'")
            break
    else:
        version = "0.1.0"

setup(
    name="senvec",
    version=version,
    description="Sentence vectors with encrypted storage and locality-sensitive hashing",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
        "Topic :: Security :: Cryptography",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.21.0",
        "pyyaml>=6.0",
        "cryptography>=41.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "coverage>=6.0",
            "ruff>=0.1",
            "mypy>=1.0",
            "black>=23.0",
            "isort>=5.0",
        ],
    },
    include_package_data=True,
    package_data={
        "senvec": ["py.typed"],
    },
    keywords=[
        "embeddings",
        "sentence-similarity",
        "lsh",
        "simhash",
        "aes-gcm",
        "encryption",
    ],
)
