from importlib.metadata import version, PackageNotFoundError


try:
    __version__ = version('stepcase')
except PackageNotFoundError:
    __version__ = 'unknown'
