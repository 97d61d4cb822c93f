"""Container configuration."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .definitions import ShareScope


@dataclass
class ContainerConfig:
    """Configuration for a container.

    Example YAML:
        share_scope: entry
        parameters:
          app.name: billing
          db.dsn: sqlite:///billing.db

    Attributes:
        share_scope: Where shared factory results are remembered ("entry" or "factory")
        parameters: Values set on the container when built with Container.from_config
    """
    share_scope: ShareScope = ShareScope.ENTRY
    parameters: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.share_scope, ShareScope):
            try:
                self.share_scope = ShareScope(str(self.share_scope).lower())
            except ValueError:
                raise ValueError(
                    f"Invalid share_scope: {self.share_scope}. "
                    f"Valid options: 'entry', 'factory'"
                ) from None
        if self.parameters is None:
            self.parameters = {}

    @classmethod
    def from_file(cls, path: str | Path) -> "ContainerConfig":
        """Load configuration from YAML file."""
        path = Path(path).expanduser()
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict) -> "ContainerConfig":
        """Create configuration from dictionary."""
        parameters = data.get("parameters") or {}
        if not isinstance(parameters, dict):
            raise ValueError(
                f"parameters must be a mapping, got {type(parameters).__name__}"
            )
        return cls(
            share_scope=data.get("share_scope") or ShareScope.ENTRY.value,
            parameters=dict(parameters),
        )

    @classmethod
    def from_env(cls, prefix: str = "SATCHEL") -> "ContainerConfig":
        """Load configuration from environment variables.

        Environment variables:
            {prefix}_CONFIG: Path to a YAML config file (default ~/.satchel.yaml)
            {prefix}_SHARE_SCOPE: entry|factory, overrides the file
        """
        config = cls.from_file(os.environ.get(f"{prefix}_CONFIG", "~/.satchel.yaml"))
        share_scope = os.environ.get(f"{prefix}_SHARE_SCOPE")
        if share_scope:
            config = cls(share_scope=share_scope, parameters=config.parameters)
        return config

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        for key in self.parameters:
            if not isinstance(key, str) or not key.strip():
                errors.append(f"parameter identifiers must be non-empty strings, got {key!r}")
        return errors
