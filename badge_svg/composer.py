"""
Core badge composition logic.
Reads icon dimensions from the PNG header, computes an aspect-preserving
layout and renders a standalone SVG document with the icon embedded inline.

Version: 1.0.0
"""

import base64
import struct
from dataclasses import dataclass
from typing import Optional, Union
from xml.sax.saxutils import escape, quoteattr

from .errors import InvalidDimensionsError, UnsupportedFormatError

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
PNG_HEADER_SIZE = 24  # signature + IHDR length/type + width/height
IHDR_LENGTH = 13

Number = Union[int, float]


@dataclass(frozen=True)
class BadgeStyle:
    """Fixed layout constants and colors shared by every badge."""

    canvas_height: int = 100
    right_panel_width: int = 60
    padding: int = 4
    corner_radius: int = 12
    left_color: str = "#E5E7EB"
    right_color: str = "#22C55E"
    check_color: str = "#FFFFFF"
    check_stroke_width: Number = 4
    border_color: str = "#708090"
    border_stroke_width: Number = 2.5


DEFAULT_STYLE = BadgeStyle()


@dataclass(frozen=True)
class ImageDimensions:
    width: int
    height: int


@dataclass(frozen=True)
class LayoutGeometry:
    """Computed positions and sizes for one badge."""

    canvas_width: Number
    canvas_height: Number
    left_panel_width: Number
    right_panel_width: Number
    image_x: Number
    image_y: Number
    image_width: Number
    image_height: Number
    checkmark_center_x: Number
    checkmark_center_y: Number


def parse_png_dimensions(header: bytes) -> ImageDimensions:
    """
    Extract width and height from the first bytes of a PNG file.

    Only the fixed-size prefix is inspected: the signature followed by the
    IHDR chunk, whose first two fields are big-endian width and height.

    Args:
        header: At least the first 24 bytes of the file (more is ignored)

    Returns:
        The pixel dimensions of the image
    """
    if len(header) < PNG_HEADER_SIZE:
        raise UnsupportedFormatError(
            f"File is too short to be a PNG ({len(header)} bytes)"
        )
    if header[:8] != PNG_SIGNATURE:
        raise UnsupportedFormatError("Missing PNG signature")

    chunk_length, chunk_type = struct.unpack(">I4s", header[8:16])
    if chunk_type != b"IHDR" or chunk_length != IHDR_LENGTH:
        raise UnsupportedFormatError("First PNG chunk is not a valid IHDR header")

    width, height = struct.unpack(">II", header[16:PNG_HEADER_SIZE])
    if width <= 0 or height <= 0:
        raise InvalidDimensionsError(f"Invalid image dimensions {width}x{height}")
    return ImageDimensions(width, height)


def read_png_dimensions(path) -> ImageDimensions:
    """Read only the PNG header prefix of a file and return its dimensions."""
    with open(path, "rb") as f:
        header = f.read(PNG_HEADER_SIZE)
    return parse_png_dimensions(header)


def _half(value: int) -> Number:
    return value // 2 if value % 2 == 0 else value / 2


def compute_layout(
    dimensions: ImageDimensions,
    style: BadgeStyle = DEFAULT_STYLE,
) -> LayoutGeometry:
    """Scale the icon to the canvas height and place the status panel beside it."""
    if dimensions.width <= 0 or dimensions.height <= 0:
        raise InvalidDimensionsError(
            f"Invalid image dimensions {dimensions.width}x{dimensions.height}"
        )

    image_height = style.canvas_height - style.padding * 2
    image_width = int(round(image_height * dimensions.width / dimensions.height))
    left_panel_width = image_width + style.padding * 2
    canvas_width = left_panel_width + style.right_panel_width

    return LayoutGeometry(
        canvas_width=canvas_width,
        canvas_height=style.canvas_height,
        left_panel_width=left_panel_width,
        right_panel_width=style.right_panel_width,
        image_x=style.padding,
        image_y=style.padding,
        image_width=image_width,
        image_height=image_height,
        checkmark_center_x=left_panel_width + _half(style.right_panel_width),
        checkmark_center_y=_half(style.canvas_height),
    )


def format_number(value: Number) -> str:
    """Render a coordinate without a trailing '.0' for whole numbers."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def checkmark_points(layout: LayoutGeometry) -> str:
    cx = layout.checkmark_center_x
    cy = layout.checkmark_center_y
    points = [(cx - 10, cy), (cx - 3, cy + 10), (cx + 12, cy - 10)]
    return " ".join(f"{format_number(x)},{format_number(y)}" for x, y in points)


def compose_badge_svg(
    layout: LayoutGeometry,
    image_data: bytes,
    icon_id: str,
    style: BadgeStyle = DEFAULT_STYLE,
    title: Optional[str] = None,
) -> str:
    """
    Build a self-contained SVG badge document.

    The icon is embedded as a base64 data URI so the document needs no
    external resources.

    Args:
        layout: Geometry returned by compute_layout
        image_data: Raw PNG bytes of the icon
        icon_id: Identifier used to name the clip path
        style: Colors and radius of the badge
        title: Optional accessible title, usually the display name

    Returns:
        The SVG document as text, ending with a newline
    """
    n = format_number
    width = n(layout.canvas_width)
    height = n(layout.canvas_height)
    radius = n(style.corner_radius)
    clip_id = quoteattr(f"clip-{icon_id}")
    clip_ref = quoteattr(f"url(#clip-{icon_id})")
    encoded = base64.b64encode(image_data).decode("ascii")

    lines = [
        '<svg xmlns="http://www.w3.org/2000/svg" '
        'xmlns:xlink="http://www.w3.org/1999/xlink" '
        f'width="{width}" height="{height}">',
    ]
    if title is not None:
        lines.append(f"  <title>{escape(title)}</title>")
    lines.extend([
        f"  <clipPath id={clip_id}>",
        f'    <rect width="{width}" height="{height}" rx="{radius}" ry="{radius}"/>',
        "  </clipPath>",
        f"  <g clip-path={clip_ref}>",
        f'    <rect width="{n(layout.left_panel_width)}" height="{height}" '
        f'fill="{style.left_color}"/>',
        f'    <rect x="{n(layout.left_panel_width)}" '
        f'width="{n(layout.right_panel_width)}" height="{height}" '
        f'fill="{style.right_color}"/>',
        "  </g>",
        f'  <image x="{n(layout.image_x)}" y="{n(layout.image_y)}" '
        f'width="{n(layout.image_width)}" height="{n(layout.image_height)}" '
        f'xlink:href="data:image/png;base64,{encoded}"/>',
        f'  <polyline points="{checkmark_points(layout)}" fill="none" '
        f'stroke="{style.check_color}" stroke-width="{n(style.check_stroke_width)}" '
        'stroke-linecap="round" stroke-linejoin="round"/>',
        f'  <rect width="{width}" height="{height}" rx="{radius}" ry="{radius}" '
        f'fill="none" stroke="{style.border_color}" '
        f'stroke-width="{n(style.border_stroke_width)}"/>',
        "</svg>",
    ])
    return "\n".join(lines) + "\n"


def generate_badge_svg(
    image_data: bytes,
    icon_id: str,
    style: BadgeStyle = DEFAULT_STYLE,
    title: Optional[str] = None,
) -> str:
    """Inspect, lay out and compose a badge from raw PNG bytes."""
    dimensions = parse_png_dimensions(image_data[:PNG_HEADER_SIZE])
    layout = compute_layout(dimensions, style)
    return compose_badge_svg(layout, image_data, icon_id, style, title)
