import os
import setuptools


TEST_DEPENDENCIES = [
    'pytest>=6.2.4',
    'mypy>=1.0',
]

EXTRA_DEPENDENCIES = {
    'test': TEST_DEPENDENCIES,
}


with open(os.path.join(
        os.path.dirname(__file__), 'ropes', '_version.py')) as f:
    for line in f:
        if line.startswith('__version__ ='):
            _, _, version = line.partition('=')
            VERSION = version.strip(" \n'\"")
            break
    else:
        raise RuntimeError(
            'unable to read the version from ropes/_version.py')


setuptools.setup(
    name='ropes',
    version=VERSION,
    description='Immutable binary-tree ropes with balancing',
    python_requires='>=3.8',
    packages=['ropes'],
    package_data={
        'ropes': ['py.typed', '*.pyi'],
    },
    include_package_data=True,
    extras_require=EXTRA_DEPENDENCIES,
)
