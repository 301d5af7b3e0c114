"""Package metadata and naming constants."""

PACKAGE_NAME = "shopfront"
PACKAGE_NAME_PYTHON = PACKAGE_NAME.replace("-", "_")
__version__ = "1.0.0"
VERSION = __version__
DESCRIPTION = "Singleton, repository and facade patterns around a small order service"
