#!/usr/bin/env python

'''
setup.py file for msenzyme
'''

from setuptools import setup, find_packages

version = open('VERSION').readline().strip()

setup(
    name                 = 'msenzyme',
    version              = version,
    description          = '''Proteolytic enzyme definitions and cleavage-termini counting for peptide identification.''',
    long_description     = (''.join(open('README.md').readlines())),
    long_description_content_type = 'text/markdown',
    python_requires      = '>=3.6',
    install_requires     = ['pyteomics', 'lxml', 'jinja2'],
    classifiers          = ['Intended Audience :: Science/Research',
                            'Programming Language :: Python :: 3',
                            'Topic :: Scientific/Engineering :: Bio-Informatics',
                            'Topic :: Scientific/Engineering :: Chemistry',
                            'Topic :: Software Development :: Libraries'],
    license              = 'License :: OSI Approved :: Apache Software License',
    packages             = find_packages(exclude=['tests']),
    package_data         = {'msenzyme': ['templates/*']},
    entry_points         = {'console_scripts': ['msenzyme = msenzyme.cli:main']}
    )
