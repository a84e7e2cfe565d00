from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version('kubemarker')
except PackageNotFoundError:  # running from a source checkout
    __version__ = 'dev'
