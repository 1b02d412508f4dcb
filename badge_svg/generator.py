"""
Batch badge generation.
Loads the ordered badge list from a JSON document and writes one SVG per
icon, skipping icons whose asset is missing or unreadable.
"""

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Sequence

from .composer import DEFAULT_STYLE, BadgeStyle, generate_badge_svg
from .errors import BadgeError, ConfigError, MissingAssetError

ICON_FIELD = "icon"
NAME_FIELD = "name"


@dataclass(frozen=True)
class BadgeSpec:
    icon_id: str
    display_name: str


@dataclass(frozen=True)
class GeneratorConfig:
    """Paths and style used for one generation run."""

    config_path: Path
    icons_dir: Path
    output_dir: Path
    icon_extension: str = ".png"
    style: BadgeStyle = DEFAULT_STYLE


@dataclass
class GenerationSummary:
    """Outcome of a generation run."""

    total: int = 0
    generated: List[Path] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)


def parse_badge_specs(data: Any) -> List[BadgeSpec]:
    """Validate a decoded configuration document into an ordered list of specs."""
    if not isinstance(data, list):
        raise ConfigError(
            f"Badge configuration must be a list, got {type(data).__name__}"
        )

    specs: List[BadgeSpec] = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise ConfigError(f"Entry {index} must be an object")
        values = []
        for key in (ICON_FIELD, NAME_FIELD):
            value = entry.get(key)
            if not isinstance(value, str) or not value:
                raise ConfigError(
                    f"Entry {index} is missing a non-empty '{key}' string"
                )
            values.append(value)
        specs.append(BadgeSpec(*values))
    return specs


def load_badge_specs(path: Path) -> List[BadgeSpec]:
    """Read the JSON configuration document at path."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        raise ConfigError(f"Cannot read badge configuration {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc
    return parse_badge_specs(data)


class BadgeGenerator:
    """Generate one SVG badge per configured icon."""

    def __init__(
        self,
        config: GeneratorConfig,
        echo: Callable[..., None] = print,
    ) -> None:
        self.config = config
        self.echo = echo

    def icon_path(self, icon_id: str) -> Path:
        return self.config.icons_dir / f"{icon_id}{self.config.icon_extension}"

    def output_path(self, icon_id: str) -> Path:
        return self.config.output_dir / f"{icon_id}.svg"

    def generate_badge(self, spec: BadgeSpec) -> Path:
        """Render and write a single badge, returning the written path."""
        icon_path = self.icon_path(spec.icon_id)
        if not icon_path.is_file():
            raise MissingAssetError(spec.icon_id, icon_path)

        image_data = icon_path.read_bytes()
        document = generate_badge_svg(
            image_data,
            spec.icon_id,
            self.config.style,
            title=spec.display_name,
        )

        target_path = self.output_path(spec.icon_id)
        with open(target_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(document)
        return target_path

    def generate_all(self, specs: Sequence[BadgeSpec]) -> GenerationSummary:
        summary = GenerationSummary(total=len(specs))
        self.config.output_dir.mkdir(parents=True, exist_ok=True)

        for spec in specs:
            try:
                target_path = self.generate_badge(spec)
            except MissingAssetError as missing:
                self.echo(f"WARNING: {missing.path} not found, skipping {spec.icon_id}")
                summary.skipped.append(spec.icon_id)
                continue
            except (BadgeError, OSError) as err:
                self.echo(
                    f"ERROR: {self.icon_path(spec.icon_id)}: {err}, skipping {spec.icon_id}",
                    file=sys.stderr,
                )
                summary.failed[spec.icon_id] = str(err)
                continue
            self.echo(f"Generated {target_path}")
            summary.generated.append(target_path)

        self.echo(
            f"Done. {len(summary.generated)} badges generated in {self.config.output_dir}"
        )
        return summary

    def run(self) -> GenerationSummary:
        """Load the configuration and generate every badge it lists."""
        specs = load_badge_specs(self.config.config_path)
        return self.generate_all(specs)
