import os

from setuptools import (
    find_packages,
    setup
)


with open(os.path.join('requirements.txt'), 'r') as f:
    REQUIRED_PACKAGES = f.readlines()

with open(os.path.join('requirements.dev.txt'), 'r') as f:
    DEV_REQUIRED_PACKAGES = f.readlines()

packages = find_packages(exclude=['tests', 'tests.*'])


setup(
    name='sciencebeam_geometry',
    version='0.0.1',
    install_requires=REQUIRED_PACKAGES,
    extras_require={
        'tests': DEV_REQUIRED_PACKAGES
    },
    packages=packages,
    include_package_data=True,
    description='ScienceBeam Geometry',
    entry_points={
        'console_scripts': [
            'transform-rectangles=sciencebeam_geometry.tools.transform_rectangles:main'
        ]
    }
)
