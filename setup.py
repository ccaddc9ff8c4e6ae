# Copyright (c) 2013-2025 NASK. All rights reserved.

import glob
import os.path as osp
import sys

from setuptools import setup, find_packages


setup_dir, setup_filename = osp.split(osp.abspath(__file__))
setup_human_readable_ref = osp.join(osp.basename(setup_dir), setup_filename)

def get_version(filename_base):
    path_base = osp.join(setup_dir, filename_base)
    path_glob_pattern = path_base + '*'
    # The non-suffixed path variant should be
    # tried only if another one does not exist.
    matching_paths = sorted(glob.iglob(path_glob_pattern),
                            reverse=True)
    try:
        path = matching_paths[0]
    except IndexError:
        sys.exit('[{}] Cannot determine the shapespec version '
                 '(no files match the pattern {!a}).'
                 .format(setup_human_readable_ref,
                         path_glob_pattern))
    try:
        with open(path, encoding='ascii') as f:
            return f.read().strip()
    except (OSError, UnicodeError) as exc:
        sys.exit('[{}] Cannot determine the shapespec version '
                 '(an error occurred when trying to '
                 'read it from the file {!a} - {}).'
                 .format(setup_human_readable_ref,
                         path,
                         exc))


version = get_version('.shapespec-version')

requirements = []
with open(osp.join(setup_dir, 'requirements'), encoding='ascii') as f:
    for raw_line in f:
        line = raw_line.strip()
        if not line or line.startswith('#'):
            continue
        requirements.append(line)

tests_requirements = ['unittest_expander>=0.4.4', 'pytest>=7.1.2']


setup(
    name="shapespec",
    version=version,

    packages=find_packages(include=['shapespec', 'shapespec.*']),
    install_requires=requirements,
    extras_require={'tests': tests_requirements},
    python_requires='>=3.9',
    include_package_data=True,
    zip_safe=False,
    entry_points={
        'console_scripts': [
            'shapespec_validate = shapespec._cli:main',
        ],
        'paste.app_factory': [
            'main = shapespec.pyramid_commons:main',
        ],
    },

    description='Sample-shape validation and normalization of JSON data.',
    classifiers=[
        'Framework :: Pyramid',
        'Intended Audience :: Developers',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
    ],
    keywords='json schema sample shape validation normalization',
)
