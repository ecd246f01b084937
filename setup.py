#! /usr/bin/env python
import os
from setuptools import setup

here = os.path.abspath(os.path.dirname(__file__))

def find_version(*file_paths):
    import re
    def read(*parts):
        with open(os.path.join(here, *parts), 'r') as fp:
            return fp.read()

    version_file = read(*file_paths)
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]",
                              version_file, re.M)
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


def readme():
    with open(os.path.join(here, 'README.md')) as f:
        return f.read()


setup(name = "multicontainers",
      version = find_version("multicontainers", "__init__.py"),
      description = "multimaps and multisets with pluggable hashed or sorted backing stores",
      long_description = readme(),
      long_description_content_type = "text/markdown",
      classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules',
      ],
      license='MIT',
      packages = ["multicontainers", "multicontainers.tests"],
      include_package_data=True,
      zip_safe = True,
      python_requires='>=3.8',
      test_suite = 'multicontainers.tests',
      install_requires=['pqdict', 'sortedcontainers'],
      extras_require={'test': ['pytest']})
