# -*- coding: utf-8 -*-

## Copyright 2015 Kevin B Jacobs
##
## Licensed under the Apache License, Version 2.0 (the "License"); you may
## not use this file except in compliance with the License.  You may obtain
## a copy of the License at
##
##        http://www.apache.org/licenses/LICENSE-2.0
##
## Unless required by applicable law or agreed to in writing, software
## distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
## WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.  See the
## License for the specific language governing permissions and limitations
## under the License.

import sys

if sys.version_info < (3, 6):
    sys.exit('Sorry, Python 3.6 or newer is required to install and run ugraph')


from setuptools import setup, find_packages

install_requires = ['pysam']
tests_require    = ['pytest', 'coverage']
extras_require   = {'test': tests_require, 'profile': ['yappi']}


classifiers = """
Development Status :: 2 - Alpha
Operating System :: OS Independent
Operating System :: POSIX
Operating System :: POSIX :: Linux
Operating System :: Unix
Programming Language :: Python :: 3
Topic :: Scientific/Engineering
Topic :: Scientific/Engineering :: Mathematics
"""


if __name__ == '__main__':
    setup(
        name = 'ugraph',
        version = '0.1.0',
        description = 'Undirected graphs with recursive and iterative depth first paths',
        url = 'https://github.com/bioinformed/ugraph',
        author = 'Kevin Jacobs',
        maintainer = 'Kevin Jacobs',
        author_email = 'jacobs@bioinformed.com',
        maintainer_email = 'jacobs@bioinformed.com',
        license = 'APACHE-2.0',
        classifiers = [c for c in classifiers.split('\n') if c],
        zip_safe = False,
        tests_require = tests_require,
        extras_require = extras_require,
        packages = find_packages(exclude=['tests']),
        install_requires = install_requires,
        entry_points={'console_scripts': ['ugraph = ugraph.cli:main']},
    )
