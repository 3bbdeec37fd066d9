"""
Configuration schema for the figura runner.

Covers the input file, the record layout, the render backend and logging.
Loaded from YAML and validated at construction (frozen dataclasses).
"""

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional, Tuple
import yaml

from figura_io.codec import RecordLayout


VALID_BACKENDS = {"null", "console", "raster"}
VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


@dataclass(frozen=True)
class RenderConfig:
    """Render backend configuration."""

    backend: str = "null"  # "null", "console" or "raster"
    resolution_wh: Tuple[int, int] = (640, 480)
    scale: float = 1.0
    origin: Tuple[float, float] = (0.0, 0.0)
    thickness: int = 2
    output_path: Optional[Path] = None  # raster only; default under ./runs/figura/

    def __post_init__(self):
        """Validate render configuration."""
        if self.backend not in VALID_BACKENDS:
            raise ValueError(
                f"Invalid backend: {self.backend}. "
                f"Must be one of {sorted(VALID_BACKENDS)}"
            )

        width, height = self.resolution_wh
        if width <= 0 or height <= 0:
            raise ValueError(
                f"resolution_wh must have positive dimensions, got {self.resolution_wh}"
            )

        if self.scale <= 0:
            raise ValueError(f"scale must be positive, got {self.scale}")

        if self.thickness < 1:
            raise ValueError(f"thickness must be >= 1, got {self.thickness}")


@dataclass(frozen=True)
class FeatureConfig:
    """
    Main configuration for one decode-and-render run.

    Immutable after construction (frozen dataclass). CLI flags are applied
    with with_overrides().
    """

    input_path: Path = Path("features.dat")
    test_mode: bool = False  # scripted source + console renderer
    log_level: str = "INFO"
    layout: RecordLayout = field(default_factory=RecordLayout)
    render: RenderConfig = field(default_factory=RenderConfig)

    def __post_init__(self):
        """Validate feature configuration."""
        if not str(self.input_path):
            raise ValueError("input_path cannot be empty")

        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(VALID_LOG_LEVELS)}"
            )

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    def with_overrides(
        self,
        input_path: Optional[str] = None,
        backend: Optional[str] = None,
        output_path: Optional[str] = None,
        test_mode: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> "FeatureConfig":
        """Copy with the given non-None values replaced."""
        render = self.render
        if backend is not None:
            render = replace(render, backend=backend)
        if output_path is not None:
            render = replace(render, output_path=Path(output_path))

        return replace(
            self,
            input_path=Path(input_path) if input_path is not None else self.input_path,
            test_mode=self.test_mode if test_mode is None else test_mode,
            log_level=log_level or self.log_level,
            render=render,
        )

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "FeatureConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            input_path: "features.dat"
            test_mode: false
            log_level: "INFO"

            layout:
              byte_order: "little"
              kind_width: 4
              param_width: 8

            render:
              backend: "raster"
              resolution_wh: [640, 480]
              scale: 20.0
              origin: [320, 240]
              thickness: 2
              output_path: "runs/figura/render.png"

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the YAML is invalid or a value fails validation
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")

        render_data = dict(data.get("render") or {})
        # bare `backend: null` in YAML loads as None
        if "backend" in render_data and render_data["backend"] is None:
            render_data["backend"] = "null"
        if "resolution_wh" in render_data:
            render_data["resolution_wh"] = tuple(render_data["resolution_wh"])
        if "origin" in render_data:
            render_data["origin"] = tuple(render_data["origin"])
        if render_data.get("output_path") is not None:
            render_data["output_path"] = Path(render_data["output_path"])

        try:
            layout = RecordLayout(**(data.get("layout") or {}))
            render = RenderConfig(**render_data)
        except TypeError as e:
            raise ValueError(f"Unknown key in {yaml_path}: {e}")

        return cls(
            input_path=Path(data.get("input_path", "features.dat")),
            test_mode=bool(data.get("test_mode", False)),
            log_level=str(data.get("log_level", "INFO")).upper(),
            layout=layout,
            render=render,
        )
