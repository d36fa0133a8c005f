#! /usr/bin/python3

import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="oae-bbb",
    version="0.1.0",
    author="Apereo Foundation",
    license="ECL-2.0",
    description="Big Blue Button meetings and meeting search hooks for Apereo OAE",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests"]),
    python_requires=">=3.7",
    install_requires=[
        'requests',
        'lxml',
        'pyjavaproperties',
    ],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
