#! /usr/bin/env python
#
# Copyright (C) 2007-2009 Cournapeau David <cournape@gmail.com>
#               2010 Fabian Pedregosa <fabian.pedregosa@inria.fr>
# License: 3-clause BSD
#
# Setup.py taken from scikit learn

descr = """Escape time fields of the Mandelbrot set, with a matplotlib viewer"""

import os
import shutil

from setuptools import setup, find_packages
from setuptools import Command


#==============================================================================
DISTNAME = 'mandelbrot'
DESCRIPTION = 'Escape time computation and viewer for the Mandelbrot set'
with open('README.rst') as f:
    LONG_DESCRIPTION = f.read()
LICENSE = 'GPL'
VERSION = '1.0.0'
#===============================================================================


INSTALL_REQUIRES = ['numpy',
                    'matplotlib']

EXTRAS_REQUIRE = {'test': ['pytest']}


###############################################################################

class CleanCommand(Command):
    description = "Remove build artifacts from the source tree"
    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        if os.path.exists('build'):
            shutil.rmtree('build')
        for dirpath, dirnames, filenames in os.walk('mandelbrot'):
            for filename in filenames:
                if filename.endswith('.pyc'):
                    os.unlink(os.path.join(dirpath, filename))
            for dirname in dirnames:
                if dirname == '__pycache__':
                    shutil.rmtree(os.path.join(dirpath, dirname))


###############################################################################

def setup_package():

    metadata = dict(name=DISTNAME,
                    description=DESCRIPTION,
                    license=LICENSE,
                    version=VERSION,
                    long_description=LONG_DESCRIPTION,
                    long_description_content_type='text/x-rst',
                    packages=find_packages(include=['mandelbrot',
                                                    'mandelbrot.*']),
                    install_requires=INSTALL_REQUIRES,
                    extras_require=EXTRAS_REQUIRE,
                    python_requires='>=3.8',
                    entry_points={
                        'console_scripts': [
                            'mandelbrot-viewer = '
                            'mandelbrot.scripts.mandelbrot_viewer:main',
                        ],
                    },
                    zip_safe=False,
                    classifiers=['Intended Audience :: Science/Research',
                                 'Intended Audience :: Developers',
                                 'License :: OSI Approved',
                                 'Programming Language :: Python',
                                 'Topic :: Scientific/Engineering',
                                 'Topic :: Scientific/Engineering :: Mathematics',
                                 'Operating System :: POSIX',
                                 'Operating System :: Unix',
                                 'Operating System :: MacOS',
                                 'Operating System :: Microsoft :: Windows',
                                 'Programming Language :: Python :: 3',
                                 ],
                    cmdclass={'clean': CleanCommand})

    setup(**metadata)


if __name__ == "__main__":
    setup_package()
