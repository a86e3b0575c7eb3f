import ast
import pathlib

from setuptools import find_packages, setup

ROOT = pathlib.Path(__file__).resolve().parent


def read_version():
    init_py = ROOT.joinpath('src', 'deducelib', '__init__.py')
    with init_py.open() as f:
        for line in f:
            if line.startswith('__version__'):
                return ast.literal_eval(line.split('=', 1)[-1].strip())
    raise RuntimeError('failed to read package version')


# Metadata lives in setup.cfg; the layout and version need code.
setup(
    package_dir={'': 'src'},
    packages=find_packages('src'),
    package_data={
        '': ['README*'],
    },
    version=read_version(),
)
