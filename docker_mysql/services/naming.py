"""Container, volume, image and port names derived from a MySQL version.

All functions are pure: the same version always yields the same name and
port, which is what lets ``stop``/``rm``/``down`` find the container that
``prepare`` created.
"""

from typing import Optional

from ..config import settings

LATEST = "latest"


def container_name(version: str, prefix: Optional[str] = None) -> str:
    """Container name for a version, e.g. ``8.0`` -> ``docker-mysql-8-0``."""
    if prefix is None:
        prefix = settings.container_prefix
    return prefix + version.replace(".", "-")


def volume_name(version: str, prefix: Optional[str] = None) -> str:
    """Named data volume; shares the container's name."""
    return container_name(version, prefix)


def image_name(version: str) -> str:
    return f"mysql:{version}"


def host_port(version: str, default_port: Optional[int] = None) -> str:
    """Host port published for a version.

    ``latest`` maps to the default port. Any other version has its dots
    removed, the first three digits kept and left-padded with zeros, and the
    default port's leading digit prepended: ``8.0`` -> ``3080``,
    ``5.7`` -> ``3057``. Longer versions truncate silently, so ``8.0.33``
    and ``8.0.34`` share ``3803``.
    """
    if default_port is None:
        default_port = settings.default_port
    if version == LATEST:
        return str(default_port)
    digits = version.replace(".", "")[:3]
    return str(default_port)[0] + digits.rjust(3, "0")[-3:]
