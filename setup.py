# -*- coding: utf-8 -*-
"""
PyURL
=====

PyURL_ is a Python library to split, join and resolve URLs as described
in RFC3986_.

.. _PyURL: https://pypi.org/project/PyURL/
.. _RFC3986: https://www.ietf.org/rfc/rfc3986.txt
"""

from setuptools import setup
import os

# get meta data
about = {}
with open(os.path.join(
        os.path.dirname(__file__), 'lib', 'pyurl', '__about__.py')) as fp:
    exec(fp.read(), about)

with open(os.path.join(os.path.dirname(__file__), 'README.rst')) as fp:
    long_description = fp.read()

setup(
    name='PyURL',
    version=about['__version__'],
    description='RFC 3986 URL splitting, joining and reference resolution',
    long_description=long_description,
    long_description_content_type='text/x-rst',
    author='PyURL contributors',
    packages=['pyurl'],
    package_dir={'': 'lib'},
    license='BSD 3-Clause license',
    python_requires='>=3.7',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Internet',
        'Topic :: Software Development :: Libraries',
    ],
    install_requires=[],
    extras_require={
        'tests': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'pyurl = pyurl.cli:main',
        ],
    },
)
