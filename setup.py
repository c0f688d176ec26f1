from pathlib import Path
from typing import Any

from setuptools import setup

HERE = Path(__file__).resolve().parent

LONG_DESCRIPTION = (HERE / "README.md").read_text(encoding="utf-8")

SETUP_ARGS: dict[str, Any] = dict(  # noqa: C408
    name="specsplit",  # Required
    version="0.4.0",  # Required
    description="Split ginkgo test specs into balanced chunks for parallel runs",  # Required
    long_description=LONG_DESCRIPTION,  # Optional
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",

        "Environment :: Console",

        "Intended Audience :: Developers",

        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",

        "Operating System :: POSIX",

        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",

        "Topic :: Software Development :: Testing",
        "Topic :: Utilities",
    ],

    # Note that this is a string of words separated by whitespace, not a list.
    keywords="ginkgo test split chunks shard focus",

    python_requires=">=3.10",
    packages=["specsplit"],  # Required
    install_requires=[],
    entry_points={
        "console_scripts": [
            "specsplit = specsplit.main:main",
        ],
    },
)

setup(**SETUP_ARGS)
