"""
Exposes the version of ellipsoids
"""
__all__ = ['__version__']

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

_VERSION_FILE = Path(__file__).resolve().parents[1] / 'VERSION'

try:
    __version__ = version('ellipsoids')
except PackageNotFoundError:
    # Running from a source tree without installed metadata
    __version__ = _VERSION_FILE.read_text(encoding='utf-8').strip() if _VERSION_FILE.exists() else None
