# -*- coding: utf-8 -*-
from setuptools import setup, find_packages

install_reqs = [
    'numba',
    'numpy',
    'pyyaml',
]

test_reqs = [
    'pytest',
]

# use entry_points, not scripts:
entry_points = {
    'console_scripts': ["raypick = raypick.cli.main:main"]
}

setup(
    name='raypick',
    version='0.1.0',
    description='pointer picking: world space rays and ray/primitive '
                'intersection tests',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    author='The raypick Development Team',
    license='LGPL-2.1',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: GNU Lesser General Public License v2 (LGPLv2)',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Topic :: Multimedia :: Graphics :: 3D Rendering',
    ],
    entry_points=entry_points,
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.9',
    install_requires=install_reqs,
    extras_require={'test': test_reqs},
)
