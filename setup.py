import os
import re
from setuptools import setup


def findPackages(moduleName):
    # implement a simple findPackages so we don't have to depend on
    # Twisted's getPackages
    packages = []
    for directory, subdirectories, files in os.walk(moduleName):
        if '__init__.py' in files:
            packages.append(directory.replace(os.sep, '.'))
    return [package for package in packages
            if not package.endswith('.test')]


def parseRequirements(filename):
    requirements = []
    for line in open(filename, 'r').read().split('\n'):
        if re.match(r'(\s*#)|(\s*$)', line):
            continue
        if re.match(r'\s*-e\s+', line):
            requirements.append(re.sub(r'\s*-e\s+.*#egg=(.*)$', r'\1', line))
        elif re.match(r'\s*-f\s+', line):
            pass
        else:
            requirements.append(line)

    return requirements


setup(name='fluidinfo',
      version='0.1',
      description='A client for the Fluidinfo HTTP API',
      author='Fluidinfo',
      author_email='fluiddb-dev@googlegroups.com',
      packages=findPackages('fluidinfo'),
      url='https://github.com/fluidinfo/fluiddb',
      classifiers=[
          'Development Status :: 4 - Beta',
          'License :: OSI Approved :: Apache Software License',
          'Operating System :: POSIX',
          'Programming Language :: Python :: 3',
          'Topic :: Internet :: WWW/HTTP',
      ],
      python_requires='>=3.7',
      install_requires=parseRequirements('requirements.txt'),
      extras_require={'test': ['testresources', 'pytest']})
