"""
Agent support badge generator.
Composes SVG badges from PNG icons: the icon on a neutral panel beside a
green panel carrying a checkmark.
"""

from .composer import (
    BadgeStyle,
    DEFAULT_STYLE,
    ImageDimensions,
    LayoutGeometry,
    parse_png_dimensions,
    read_png_dimensions,
    compute_layout,
    compose_badge_svg,
    generate_badge_svg,
)
from .errors import (
    BadgeError,
    ConfigError,
    InvalidDimensionsError,
    MissingAssetError,
    UnsupportedFormatError,
)
from .generator import (
    BadgeGenerator,
    BadgeSpec,
    GenerationSummary,
    GeneratorConfig,
    load_badge_specs,
    parse_badge_specs,
)

__all__ = [
    "BadgeStyle",
    "DEFAULT_STYLE",
    "ImageDimensions",
    "LayoutGeometry",
    "parse_png_dimensions",
    "read_png_dimensions",
    "compute_layout",
    "compose_badge_svg",
    "generate_badge_svg",
    "BadgeError",
    "ConfigError",
    "InvalidDimensionsError",
    "MissingAssetError",
    "UnsupportedFormatError",
    "BadgeGenerator",
    "BadgeSpec",
    "GenerationSummary",
    "GeneratorConfig",
    "load_badge_specs",
    "parse_badge_specs",
]
