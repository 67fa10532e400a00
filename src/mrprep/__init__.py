from mrprep._version import __version__
from mrprep import data, errors, preprocessing, reconstruction

__all__ = [
    "__version__",
    "data",
    "errors",
    "preprocessing",
    "reconstruction"
]
