"""
Detecting the package's own version from the installed distribution metadata.

There is no version string in the source code: releases are made by tagging,
and setuptools_scm puts the tag into the distribution's metadata at build time.

The version is determined once, when the package is imported. When running
from a plain source checkout (not installed), the version remains unknown.
"""
import importlib.metadata
from typing import Optional

DISTRIBUTION_NAME, *_ = __name__.split('.')  # "hostfqdn", unless vendored under another name.

version: Optional[str]
try:
    version = importlib.metadata.version(DISTRIBUTION_NAME)
except importlib.metadata.PackageNotFoundError:
    version = None
