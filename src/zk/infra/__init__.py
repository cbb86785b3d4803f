"""Infrastructure layer — file-system integration.

Every raw ``OSError`` must be caught here and re-raised as a
:class:`~zk.exceptions.ZkError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from zk.infra.config_file import ConfigStatus, default_config_path, load_config, probe_config

__all__: list[str] = [
    "ConfigStatus",
    "default_config_path",
    "load_config",
    "probe_config",
]
