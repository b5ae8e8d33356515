#!/usr/bin/env python

from setuptools import setup

with open('README.md') as readme_file:
    readme = readme_file.read()

with open('tabledef/VERSION') as f:
    version = f.read().lstrip().rstrip()

setup(
    name='tabledef',
    version=version,
    author='Netherlands Forensic Institute',
    description="Parser for CREATE TABLE statements",
    long_description=readme+"\n\n",
    long_description_content_type='text/markdown',
    packages=['tabledef'],
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3 :: Only',
        'Intended Audience :: Developers',
        'Topic :: Database',
        'Topic :: Software Development :: Libraries :: Python Modules',
        ],
    keywords='sql parser create table ddl',
    python_requires='>=3.6',
    install_requires=[
        'modgrammar'
    ],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=False,
    package_data={
        # include the VERSION file
        'tabledef': ['VERSION'],
    }
)
