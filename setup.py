import re
import sys


if "test" in sys.argv:
    import huffarc
    # when test was successful, return 0 (hence not)
    sys.exit(not huffarc.test().wasSuccessful())

from setuptools import setup


kwds = {}
try:
    kwds['long_description'] = open('README.rst').read()
except IOError:
    pass

# Read version from huffarc/__init__.py
pat = re.compile(r"^__version__\s*=\s*'(\S+)'", re.M)
data = open('huffarc/__init__.py').read()
kwds['version'] = pat.search(data).group(1)

setup(
    name = "huffarc",
    license = "PSF-2.0",
    classifiers = [
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: System :: Archiving :: Compression",
        "Topic :: Utilities",
    ],
    description = "lossless file compression using Huffman coding",
    packages = ["huffarc"],
    python_requires = ">=3.8",
    install_requires = ["bitarray>=3.0"],
    entry_points = {
        "console_scripts": ["huffarc = huffarc.__main__:main"],
    },
    zip_safe = False,
    **kwds
)
