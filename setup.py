import re
from os import path

from setuptools import find_packages, setup


# Regex matching pattern followed by 3 numerical values separated by '.'
pattern = re.compile(r'# v(?P<version>[0-9]+\.[0-9]+(\.[0-9]+(\.[a-z0-9]+)?)?)')


def get_version():
    with open('CHANGELOG.md', 'r') as fn:
        for line in fn.readlines():
            match = pattern.fullmatch(line.strip())
            if match:
                return ''.join(match.group('version'))
    raise RuntimeError('No version found in CHANGELOG.md')


base_dir = path.abspath(path.dirname(__file__))


def get_readme_content():
    readme_file = path.join(base_dir, 'README.md')
    with open(readme_file, 'r') as f:
        return f.read()


if __name__ == '__main__':
    setup(
        version=get_version(),
        name='kubemarker',
        description=(
            'Kubemarker tags Kubernetes manifests with ownership markers so '
            'live objects can be traced back to the app that manages them.'
        ),
        author='EDITED devs',
        author_email='dev@edited.com',
        long_description=get_readme_content(),
        long_description_content_type='text/markdown',
        packages=find_packages(exclude=('tests', 'tests.*')),
        entry_points={
            'console_scripts': (
                'kubemarker=kubemarker.cli.__main__:main',
            ),
        },
        python_requires='>=3.8',
        install_requires=(
            'click>=7,<9',
            'pyyaml>=5.1,<7',
            # Only the client models/serializer are used, no cluster access
            'kubernetes>=21.7.0',
            'tabulate<1',
        ),
        extras_require={
            'dev': (
                'ipdb',
                'pytest>=6',
                'pytest-cov',
                'flake8',
                'flake8-import-order',
                'flake8-commas',
            ),
        },
        classifiers=[
            'Development Status :: 4 - Beta',
            'Environment :: Console',
            'Intended Audience :: Developers',
            'Intended Audience :: Information Technology',
            'License :: OSI Approved :: MIT License',
            'Operating System :: POSIX',
            'Programming Language :: Python',
            'Programming Language :: Python :: 3.8',
            'Programming Language :: Python :: 3.9',
            'Programming Language :: Python :: 3.10',
            'Programming Language :: Python :: 3.11',
            'Programming Language :: Python :: 3.12',
            'Topic :: Software Development :: Build Tools',
            'Topic :: System :: Software Distribution',
        ],
    )
