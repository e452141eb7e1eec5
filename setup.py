import os

from setuptools import setup, find_packages

with open(os.path.join(os.path.dirname(__file__), "readme.md"), "r") as fh:
    long_description = fh.read()

setup(
    name='tambula-server',
    version='1.0.0',
    license='MIT',
    description='An authenticated API for generating and fetching tambula tickets.',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires='>=3.8',
    install_requires=[
        'aiohttp>=3.8,<4',
        'aiohttp-cors>=0.7',
        'aiohttp-apispec>=2.2',
        'apispec>=5.1',
        'attrs',
        'bcrypt>=4',
        'marshmallow>=3.13,<4',
        'marshmallow-jsonschema>=0.13',
        'python-jose[cryptography]>=3.3',
        'sentry-sdk>=1.5',
        'tortoise-orm>=0.21',
        'uvloop; platform_system != "Windows"',
    ],
    extras_require={
        'test': [
            'pytest>=7',
            'pytest-aiohttp>=1.0',
            'pytest-asyncio>=0.23',
            'faker',
        ],
    },
    entry_points={
        'console_scripts': ['tambula=tambula.cli:run'],
    },
)
