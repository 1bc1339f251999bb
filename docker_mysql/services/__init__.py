"""MySQL container services.

This package provides:
- naming.py: container, volume, image and port names for a version
- process.py: external command execution
- container.py: container lifecycle (up, stop, down)
- mysql.py: SQL execution inside the container
- provisioner.py: the prepare sequence
"""

from .naming import container_name, host_port, image_name, volume_name
from .process import ProcessRunner
from .container import ContainerManager
from .mysql import MySQLClient
from .provisioner import Provisioner

__all__ = [
    "container_name",
    "host_port",
    "image_name",
    "volume_name",
    "ProcessRunner",
    "ContainerManager",
    "MySQLClient",
    "Provisioner",
]
