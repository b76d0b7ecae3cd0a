# electruss/config.py
"""
Application configuration and defaults.

Only presentation and editor defaults live here. The numeric tolerances of
the engine (minimum member length, pivot threshold) are fixed constants in
``electruss.elements`` and ``electruss.kernel.solve``.
"""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass
class AppConfig:
    """Global application configuration."""

    # App metadata
    app_name: str = "electruss"
    app_subtitle: str = "2D Truss Analysis Engine"
    version: str = "0.1.0"

    # Editor defaults for newly drawn members
    default_area: float = 1.0
    default_elastic_modulus: float = 1e9

    # Canvas pixels per model unit (canvas y axis points down)
    canvas_scale: float = 10.0

    # Member line widths, scaled by area
    member_width_range: Tuple[float, float] = (5.0, 25.0)

    # Deformed shape is drawn so the largest displacement is this fraction
    # of the structure's bounding-box size
    plot_deformation_ratio: float = 0.1

    # API
    cors_origins: List[str] = None

    def __post_init__(self):
        if self.cors_origins is None:
            self.cors_origins = ['http://localhost:3000', 'http://127.0.0.1:3000']


# Global config instance
CONFIG = AppConfig()
