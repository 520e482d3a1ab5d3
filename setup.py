#!python

import os.path, sys
from setuptools import setup, find_packages

sys.path.insert(0, os.path.abspath("src"))
from porterstem import versionstring


if __name__ == "__main__":
    setup(
        name="porterstem",
        version=versionstring(),
        package_dir={'': 'src'},
        packages=find_packages("src"),
        python_requires=">=3.7",

        description="Pure-Python implementation of the Porter stemming algorithm.",
        long_description=open("README.txt").read(),

        license="Two-clause BSD license",
        keywords="stemming stemmer porter text search index",

        zip_safe=True,
        extras_require={"test": ["pytest"]},
        entry_points={
            "console_scripts": ["porterstem = porterstem.command:main"],
        },

        classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Text Processing :: Indexing",
        "Topic :: Text Processing :: Linguistic",
        ],
    )
