from setuptools import setup

from dungeoncrawl.version import __version__

setup(
    name="dungeoncrawl",
    version=__version__,
    description=("Graph-based dungeon crawler with bitwise combat and save files"),
    license="GPL-3.0",
    python_requires=">=3.10",
    install_requires=[
        "typing_extensions",
        "mrcrowbar >= 1.0.0rc1",
        "graphviz",
    ],
    extras_require={
        "test": ["pytest"],
    },
    packages=["dungeoncrawl"],
    entry_points={
        "console_scripts": [
            "dungeoncrawl = dungeoncrawl.cli:main",
        ],
    },
)
