"""uidcputime version information."""

__version__ = "1.0.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

APP_NAME = "uidcputime"
DESCRIPTION = "Per-UID CPU time delta reader for /proc/uid_cputime"
LICENSE = "Apache-2.0"
