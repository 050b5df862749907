"""
Configuration schema for a masked container.

Defines the hole to cut, the container size used for pixel resolution, and
the log level, loaded from YAML.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union
import logging

import yaml

from holemask.geometry.shapes import HoleDescriptor
from holemask.logging import LogEvent, create_logger

logger = create_logger("config")

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}
MAX_CONTAINER_DIMENSION = 16384


@dataclass(frozen=True)
class MaskConfig:
    """
    Masked container configuration.

    Immutable after construction (frozen dataclass).
    """

    hole: HoleDescriptor
    container_wh: Tuple[int, int] = (1280, 720)  # (width, height)
    log_level: str = "INFO"
    source: Optional[Path] = field(default=None, compare=False)

    def __post_init__(self):
        """Validate mask configuration."""
        if not isinstance(self.hole, HoleDescriptor):
            raise TypeError(f"hole must be HoleDescriptor, got {type(self.hole)}")

        width, height = self.container_wh
        if width <= 0 or height <= 0:
            raise ValueError(
                f"container_wh must have positive dimensions, got {self.container_wh}"
            )
        if width > MAX_CONTAINER_DIMENSION or height > MAX_CONTAINER_DIMENSION:
            raise ValueError(
                f"container_wh dimensions too large "
                f"(max {MAX_CONTAINER_DIMENSION}x{MAX_CONTAINER_DIMENSION}), got {self.container_wh}"
            )

        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(VALID_LOG_LEVELS)}"
            )

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: Optional[Path] = None) -> "MaskConfig":
        """
        Build configuration from a mapping (see from_yaml for the layout).

        Raises:
            ValueError: If the 'hole' section is missing or invalid
        """
        if not isinstance(data, dict):
            raise ValueError(f"Config must be a mapping, got {type(data).__name__}")
        if "hole" not in data:
            raise ValueError("Config is missing required section: 'hole'")

        hole = HoleDescriptor.from_dict(data["hole"])
        container_wh = tuple(data.get("container_wh", [1280, 720]))
        if len(container_wh) != 2:
            raise ValueError(f"container_wh must be [width, height], got {list(container_wh)}")

        return cls(
            hole=hole,
            container_wh=container_wh,
            log_level=str(data.get("log_level", "INFO")).upper(),
            source=source,
        )

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "MaskConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            container_wh: [1000, 800]  # [width, height]
            log_level: INFO

            hole:
              x: "50%"
              y: "50%"
              size: "200px 100px"
              anchor: ANCHOR_MIDDLE
              shape: SHAPE_RECTANGLE

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the YAML or its content is invalid
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}")

        config = cls.from_dict(data, source=path)
        logger.info(
            event=LogEvent.CONFIG_LOADED,
            message=f"Loaded mask config from {path}",
            metadata={'hole': config.hole.to_dict(), 'container_wh': list(config.container_wh)}
        )
        return config
