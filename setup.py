"""Packaging settings."""

from codecs import open as codecs_open
from os.path import abspath, dirname, join

from setuptools import find_packages, setup

THIS_DIR = abspath(dirname(__file__))


with codecs_open(join(THIS_DIR, "README.md"), encoding="utf-8") as readfile:
    LONG_DESCRIPTION = readfile.read()


INSTALL_REQUIRES = [
    "awacs",  # policy documents
    "boto3>=1.26.0,<2.0",
    "botocore>=1.29.0",  # matching boto3 requirement
    "click>=8.0",
    "coloredlogs",
    "humanfriendly",  # dependency of coloredlogs, used directly for color detection
    "pydantic>=2.0,<3.0",
    "requests",
    "typing_extensions",
]

EXTRAS_REQUIRE = {
    "test": [
        "pytest",
        "pytest-mock",
    ],
}


setup(
    name="rosactl",
    version="0.1.0",
    description="Prepare AWS accounts to host the OIDC providers of ROSA clusters",
    long_description=LONG_DESCRIPTION,
    long_description_content_type="text/markdown",
    license="Apache License 2.0",
    classifiers=[
        "Intended Audience :: Developers",
        "Topic :: Utilities",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    keywords="cli",
    packages=find_packages(exclude=("tests*",)),
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,
    entry_points={"console_scripts": ["rosactl=rosactl._cli.main:cli"]},
    package_data={"rosactl.provisioner": ["requirements.txt"]},
    include_package_data=True,
)
