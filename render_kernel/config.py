#
# PROJECT: render-kernel
# MODULE: render_kernel/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import os
from dataclasses import dataclass

from .encoders import ENCODERS

logger = logging.getLogger(__name__)

ENV_PREFIX = 'RENDER_KERNEL_'


@dataclass
class RenderConfig:
    """Configuration for producing an image with the kernel."""
    width: int = 320
    height: int = 240
    fov: float = 60.0
    distance: float = 6.0
    near_clip: float = 0.1
    far_plane: float = 150.0
    output_format: str = 'ppm'
    bg_color: str = '#0E0E2C'
    fg_color: str = '#D0DD14'

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        if not 0.0 < self.near_clip < self.far_plane:
            raise ValueError("Clip planes must satisfy 0 < near_clip < far_plane")
        self.output_format = self.output_format.lower()
        if self.output_format not in ENCODERS:
            raise ValueError(f"Unknown output format '{self.output_format}'")

    @property
    def aspect(self) -> float:
        return self.width / self.height

    @classmethod
    def from_env(cls, environ=None) -> 'RenderConfig':
        """
        Build a config from RENDER_KERNEL_* environment variables.
        Unparsable values are logged and replaced by the defaults.
        """
        environ = os.environ if environ is None else environ
        overrides = {}
        for name, cast in (('width', int), ('height', int), ('fov', float),
                           ('format', str)):
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw is None:
                continue
            try:
                value = cast(raw)
            except ValueError:
                logger.warning("Ignoring %s%s=%r", ENV_PREFIX, name.upper(), raw)
                continue
            overrides['output_format' if name == 'format' else name] = value
        return cls(**overrides)
