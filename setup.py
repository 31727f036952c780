"""
Setup script for the MCTS chess engine package.

This script allows the package to be installed using pip.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="mcts-chess",
    version="0.1.0",
    description="Monte Carlo Tree Search chess engine with lightweight random rollouts",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    package_data={"config": ["*.yaml"]},
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
        "Topic :: Games/Entertainment :: Board Games",
    ],
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.19.0",
        "chess>=1.9.0",
        "matplotlib>=3.3.0",
        "pyyaml>=5.3.0",
        "tqdm>=4.46.0",
    ],
    extras_require={
        "test": [
            "pytest>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "mcts-chess=main:main",
        ],
    },
)
