import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

from .errors import ConfigError
from .generator import BadgeGenerator, GeneratorConfig

DEFAULT_CONFIG_PATH = Path("scripts") / "badge_config.json"
DEFAULT_ICONS_DIR = Path("assets") / "docs" / "agents"
DEFAULT_OUTPUT_DIR = Path("assets") / "docs" / "badges"


def parse_arguments(argv: Iterable[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Generate SVG support badges combining each agent icon with a "
            "status checkmark."
        )
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=Path("."),
        help="Repository root the default paths are resolved against (default: current directory).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Badge configuration JSON (default: <root>/{DEFAULT_CONFIG_PATH.as_posix()}).",
    )
    parser.add_argument(
        "--icons-dir",
        type=Path,
        default=None,
        help=f"Folder holding <icon>.png files (default: <root>/{DEFAULT_ICONS_DIR.as_posix()}).",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help=f"Folder the SVG badges are written to (default: <root>/{DEFAULT_OUTPUT_DIR.as_posix()}).",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    root: Path = args.root

    def resolve(value: Optional[Path], default: Path) -> Path:
        return value if value is not None else root / default

    return GeneratorConfig(
        config_path=resolve(args.config, DEFAULT_CONFIG_PATH),
        icons_dir=resolve(args.icons_dir, DEFAULT_ICONS_DIR),
        output_dir=resolve(args.output_dir, DEFAULT_OUTPUT_DIR),
    )


def main(argv: Iterable[str]) -> int:
    try:
        args = parse_arguments(argv)
        generator = BadgeGenerator(build_config(args))
        generator.run()
        return 0
    except ConfigError as config_err:
        print(f"Error: {config_err}", file=sys.stderr)
    except OSError as os_err:
        print(f"Error: {os_err}", file=sys.stderr)
    except Exception as unexpected_err:  # noqa: BLE001
        print(f"Unexpected error: {unexpected_err}", file=sys.stderr)
    return 1


def entrypoint() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    entrypoint()
