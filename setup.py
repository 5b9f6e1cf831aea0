# -*- coding: utf-8 -*-
"""vezor_secrets a module for reading secrets from the Vezor secrets API.

This module provides a read only client for Vezor, finding secrets by name and tags and
pulling the secrets a group resolves to, plus decorators to inject them into functions.

"""

import setuptools
import re
from io import open

VERSIONFILE="vezor_secrets/_version.py"
verstrline = open(VERSIONFILE, "rt").read()
VSRE = r"^__version__ = ['\"]([^'\"]*)['\"]"
mo = re.search(VSRE, verstrline, re.M)
if mo:
    verstr = mo.group(1)
else:
    raise RuntimeError("Unable to find version string in %s." % (VERSIONFILE,))

with open("README.md", "r", encoding='utf-8') as fh:
    long_description = fh.read()

setuptools.setup(
    name='vezor_secrets',
    version=verstr,
    description="A read only client for the Vezor secrets API that finds secrets by name and tags and pulls group secrets",
    long_description_content_type="text/markdown",
    long_description=long_description,
    packages=setuptools.find_packages(),
    tests_require=['pytest'],
    extras_require={
        "test": ["pytest"],
    },
    include_package_data=True,
    license="MIT",
    scripts=[],
    install_requires=[
        "requests>=2.0,<3.0",
        "python-dateutil~=2.0",
        "pytz>=2022.0"
    ],
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],

)
