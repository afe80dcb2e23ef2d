"""
setup.py for Presentable pip package.


Creating a Presentable Development Environment
----------------------------------------------

To create a Conda environment for Presentable development, from the
directory containing this file:

    conda create -n presentable-dev python=3.11
    conda activate presentable-dev
    pip install -e .


Running Presentable Unit Tests
------------------------------

The unit tests configure Django themselves (with an in-memory SQLite
database), so no Django project is needed to run them:

    conda activate presentable-dev
    python -m unittest discover -s presentable -t .

To run the unit tests for just one subpackage of the `presentable`
package:

    python -m unittest discover -s presentable/<subpackage> -t .


Building and Uploading the Presentable Package
----------------------------------------------

The package build and upload commands below should be issued from within
the directory containing this file.

To build the Presentable package:

    conda activate presentable-dev
    python -m build

The build process will write package `.tar.gz` and `.whl` files to the
`dist` subdirectory of the directory containing this file.

To upload a built package to the real Python package index:

    python -m twine upload dist/*
"""


from importlib.util import module_from_spec, spec_from_file_location
from pathlib import Path
from setuptools import find_packages, setup


def load_version_module(package_name):
    module_name = f'{package_name}.version'
    file_path = Path(f'{package_name}/version.py')
    spec = spec_from_file_location(module_name, str(file_path))
    module = module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


version = load_version_module('presentable')


setup(

    name='presentable',
    version=version.__version__,
    description=(
        'Presenters that decorate Django models and other records with '
        'presentation logic.'),
    license='MIT',

    packages=find_packages(

        # The test packages include a small Django app and settings
        # module that exist only to exercise presenters against a real
        # model, so we leave them out of installations.
        exclude=['tests', 'tests.*', '*.tests.*', '*.tests']

    ),

    classifiers=[
        'Framework :: Django',
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],

    python_requires='>=3.10',

    install_requires=[
        'django>=4.2',
        'environs[django]',
        'ruamel.yaml',
    ],

    include_package_data=True,
    zip_safe=False

)
