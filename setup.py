# setup.py
from setuptools import setup, find_packages

setup(
    name='pythra-leaflet',
    version='0.1.0',
    author='Ahmad Muhammad Bashir (RED X)',
    author_email='ambashir02@gmail.com',
    description='Bridges a declarative tree of map elements to live Leaflet-style native objects.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',

    # Finds `pythra_leaflet` and `pythra_leaflet_cli`
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,

    # These are the dependencies the bridge needs to run.
    install_requires=[
        'PySide6',
        'PyYAML',
        'typer',
    ],
    extras_require={
        'test': ['pytest'],
    },

    entry_points={
        'console_scripts': [
            'pythra-leaflet = pythra_leaflet_cli.main:app',
        ],
    },

    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: User Interfaces',
        'Topic :: Scientific/Engineering :: GIS',
    ],
    python_requires='>=3.10',
)
