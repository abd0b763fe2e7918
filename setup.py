#!/usr/bin/env python

import setuptools
import randrun

setup = {
    'name': 'randrun',
    'version': randrun.VERSION,
    'description': "Run a command over shuffled, filtered batches of arguments",
    'py_modules': ['randrun'],
    'python_requires': '>=3.5',
    'test_suite': 'tests',
}

setuptools.setup(**setup)
