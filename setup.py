"""
docshelf setup.py — Package configuration.
"""

from setuptools import find_packages, setup

setup(
    name="docshelf",
    version="1.0.0",
    description="docshelf — Read and write files in the per-user Documents folder",
    packages=find_packages(include=["docshelf", "docshelf.*"]),
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.5",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
)
