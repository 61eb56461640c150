#!/usr/bin/env python3
from setuptools import setup

setup(
    name='textrepr',
    version='0.1.0',
    license='GNU Affero GPL v3',
    description='classify text into typed, stemmed token representations',
    long_description=open('README.rst', encoding='utf-8').read(),
    python_requires='>=3.7',
    install_requires=[
        'nltk >= 3.0',
    ],
    extras_require={
        'test': ['pytest >= 7.0'],
    },
    packages=[
        'textrepr',
        'textrepr.nlp',
        'textrepr.text',
    ],
    package_dir={'': 'src'},
    scripts=[
        'scripts/textrepr.py',
    ],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'License :: OSI Approved :: GNU Affero General Public License v3',
        'Operating System :: POSIX',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
        'Topic :: Text Processing',
        'Topic :: Text Processing :: Linguistic',
    ],
)
