#!/usr/bin/env python3
import setuptools

setuptools.setup(
    name="import-optimizer",
    version="0.1.0",
    packages=["import_optimizer"],
    python_requires=">=3.11",
    install_requires=["click"],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "imopt = import_optimizer.cli:main",
        ],
    },
    author="",
    description="Command-line tool to sort, deduplicate and merge ES module import statements",
    license="MIT",
)
