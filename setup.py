from setuptools import setup, find_packages
import re

# Read version from empcomp/__init__.py
with open('empcomp/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='emp-comp',
    version=version,
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'PyYAML>=6.0',
        'click>=8.0',
        'pydantic>=2.0.0',
        'rich>=13.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'emp-comp=empcomp.cli.__main__:main',
        ],
    },
    author='Personal',
    description='Employee pay, rewards and stock option calculator.',
    python_requires='>=3.10',
)
