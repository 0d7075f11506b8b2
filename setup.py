import re
from setuptools import setup

__version__ ,= re.findall('__version__: str = "(.*)"', open('ezc/__init__.py').read())

setup(
    name = "ezc",
    version = __version__,
    packages = ['ezc', 'ezc.tools'],

    requires = [],
    install_requires = [],

    extras_require = {
        "tests": ["pytest"],
    },

    package_data = {'ezc': ['py.typed']},

    test_suite = 'tests.__main__',

    python_requires = ">=3.6",

    description = "a parser for the ezc configuration language",
    license = "MIT",
    keywords = "config configuration parser lexer",
    long_description='''
ezc reads a small, line-oriented configuration language into a Python document.

An ezc file holds root variables, followed by flat categories of variables:

    name = "server";
    port = 0x1F90;
    ratio = .5;

    -limits-
    sizes = [1, 2, 3];
    strict = true;

Main Features:
 - Booleans, decimal, hexadecimal and octal integers, floats, strings with escapes, and arrays
 - Precise line, column and offset tracking for every token
 - Typed, descriptive errors with source context
 - No dependencies
''',

    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Text Processing :: General",
        "License :: OSI Approved :: MIT License",
    ],
    entry_points = {
        'console_scripts': [
            'ezc-dump = ezc.tools.dump:main'
        ]
    },
)
