# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from setuptools import setup, find_packages
from os.path import abspath, dirname, join

class DevelopmentStatus:

    planning = "1 - Planning"
    pre_alpha = "2 - Pre-Alpha"
    alpha = "3 - Alpha"
    beta = "4 - Beta"
    stable = "5 - Production/Stable"
    mature = "6 - Mature"
    inactive = "7 - Inactive"

CURRENT_STATUS = DevelopmentStatus.alpha

def get_path_to_base_directory():
    return abspath(dirname(__file__))

def get_file_contents(*args):
    with open(join(*args)) as the_file:
        result = the_file.read()

    return result

base_dir = get_path_to_base_directory()
long_desc = get_file_contents(base_dir, "README.rst")

setup(
    name="tiffscope",
    version="1.0.0.dev0",
    description="Inspect the IFDs and decoded strips of classic tiffs",
    long_description=long_desc,
    license="BSD-3-Clause",
    author="Matt LaChance",
    author_email="mattlach@umich.edu",

    classifiers=[
        " :: ".join(("Development Status", CURRENT_STATUS)),
        " :: ".join(("License", "OSI Approved", "BSD License")),
        " :: ".join(("Natural Language", "English")),
        " :: ".join(("Programming Language", "Python", "3", "Only")),
        " :: ".join(("Topic", "Multimedia",
                     "Graphics", "Graphics Conversion")),
    ],

    packages=find_packages(include=["tiffscope", "tiffscope.*"]),
    python_requires=">=3.5",
    install_requires=["numpy"],
    extras_require={
        "test": ["PyHamcrest", "pytest"],
    },
    entry_points={
        "console_scripts": ["tiffscope = tiffscope.cli:main"],
    },
)
