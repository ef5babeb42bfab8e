"""
Command-line interface for SkewTCharts package.

Provides argparse-based CLI with subcommands for rendering a sounding file to
a chart and probing the sample nearest to a pressure level.

Usage:
    skewt-charts render --input sounding.json --site Payerne --source Radiosonde --output skewt.png
    skewt-charts render --input sounding.yaml --output-dir charts/ --format svg
    skewt-charts probe --input sounding.json --pressure 780 --speed-unit kt
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from .api import create_skewt, probe_sounding
from .config import Config
from .constants import WIND_SPEED_UNITS
from .data import load_sounding
from .exceptions import SkewTChartsError
from .export import export_filename, scene_to_svg
from .logging_config import setup_logging
from .rendering import compute_scene


def setup_logging_from_args(args: argparse.Namespace) -> None:
    """
    Configure logging based on command-line arguments.

    Args:
        args: Parsed command-line arguments with verbose, quiet, log_file
    """
    if hasattr(args, 'silent') and args.silent:
        verbosity = -2  # ERROR
    elif hasattr(args, 'quiet') and args.quiet:
        verbosity = -1  # WARNING
    elif hasattr(args, 'verbose') and args.verbose:
        verbosity = 1  # DEBUG
    else:
        verbosity = 0  # INFO

    log_file = getattr(args, 'log_file', None)
    setup_logging(verbosity=verbosity, log_file=log_file)


def load_config(config_path: Optional[str]) -> Optional[Config]:
    """
    Load configuration from file.

    Args:
        config_path: Path to config file (YAML or JSON)

    Returns:
        Config object or None if no path provided
    """
    if config_path is None:
        return None

    try:
        return Config.load_from_file(config_path)
    except Exception as e:
        print(f"Error loading config from {config_path}: {e}", file=sys.stderr)
        sys.exit(1)


def _cli_print(args: argparse.Namespace, *values: object, **kwargs) -> None:
    """Print unless --silent was provided."""
    if getattr(args, "silent", False):
        return
    print(*values, **kwargs)


def _apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Copy command-line overrides onto the loaded configuration."""
    if getattr(args, "width", None):
        config.width = args.width
    if getattr(args, "height", None):
        config.height = args.height
    if getattr(args, "dpi", None):
        config.dpi = args.dpi
    if getattr(args, "speed_unit", None):
        config.speed_unit = args.speed_unit
    if getattr(args, "background_color", None):
        config.background_color = args.background_color
    return config


def cmd_render(args: argparse.Namespace) -> int:
    """Handle 'render' subcommand."""
    _cli_print(args, f"Rendering SkewT chart from {args.input}")

    try:
        config = load_config(args.config)
        if config is None:
            config = Config()
        config = _apply_overrides(config, args)

        sounding = load_sounding(args.input)
        site = args.site or sounding.site or Path(args.input).stem
        source = args.source or sounding.source or "unknown"

        if args.output:
            output_path = Path(args.output)
        else:
            output_dir = Path(args.output_dir) if args.output_dir else config.output_dir
            output_path = output_dir / export_filename(site, source)
        if args.format == "svg":
            output_path = output_path.with_suffix(".svg")

        if args.format == "svg":
            config.validate()
            scene = compute_scene(sounding.profile, site, source, config)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(scene_to_svg(scene, config), encoding="utf-8")
        else:
            output_path = create_skewt(
                sounding.profile,
                site,
                source,
                output_path=output_path,
                config=config
            )

        if getattr(args, "silent", False):
            print(str(output_path))
        else:
            print(f"Success! Chart saved to: {output_path}")
        return 0

    except SkewTChartsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


def cmd_probe(args: argparse.Namespace) -> int:
    """Handle 'probe' subcommand."""
    try:
        config = load_config(args.config)
        if config is None:
            config = Config()
        config = _apply_overrides(config, args)

        sounding = load_sounding(args.input)
        readout = probe_sounding(
            sounding.profile,
            pressure=args.pressure,
            pixel_y=args.y,
            config=config
        )

        if readout is None:
            print("Error: sounding needs at least two samples to probe", file=sys.stderr)
            return 1

        _cli_print(args, f"Probe at {readout.pointer_pressure:.1f} hPa")
        print(f"pressure: {readout.sample.pressure:g} hPa")
        for name, channel in (
            ("temperature", readout.temperature),
            ("dew point", readout.dew_point),
            ("height", readout.height),
            ("wind speed", readout.wind_speed),
        ):
            if channel is not None:
                print(f"{name}: {channel.text}")
        return 0

    except SkewTChartsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


def main(argv=None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        prog="skewt-charts",
        description="Draw SkewT-logP diagrams from sounding data",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    def _add_common_globalish_args(p: argparse.ArgumentParser, subcommand: bool = False) -> None:
        """Add args that users reasonably expect to work after subcommands too.

        Argparse only treats options as "global" when they appear before the
        subcommand token, so these are added to the subparsers as well. The
        subparser copies default to SUPPRESS: a subparser writes its defaults
        over the parent namespace, which would discard values given before
        the subcommand.
        """
        defaults = {"default": argparse.SUPPRESS} if subcommand else {}

        p.add_argument(
            "-v", "--verbose",
            action="store_true",
            help="Enable DEBUG logging",
            **defaults
        )
        p.add_argument(
            "-q", "--quiet",
            action="store_true",
            help="Suppress INFO logging (WARNING+ only)",
            **defaults
        )
        p.add_argument(
            "--silent",
            action="store_true",
            help="Suppress most console output (prints only final output)",
            **defaults
        )
        p.add_argument(
            "--log-file",
            type=str,
            help="Write logs to file",
            **defaults
        )
        p.add_argument(
            "--config",
            type=str,
            help="Path to config file (YAML or JSON)",
            **defaults
        )
        p.add_argument(
            "--speed-unit",
            choices=list(WIND_SPEED_UNITS),
            help="Wind speed unit for readouts (ms, kt, kmh)",
            **defaults
        )

    # Global arguments, valid before the subcommand; these carry the real defaults
    _add_common_globalish_args(parser)

    # Subcommands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # ========================================================================
    # render subcommand
    # ========================================================================
    parser_render = subparsers.add_parser(
        "render",
        help="Render a sounding file to a SkewT chart"
    )
    _add_common_globalish_args(parser_render, subcommand=True)
    parser_render.add_argument(
        "--input",
        type=str,
        required=True,
        help="Sounding file (JSON or YAML)"
    )
    parser_render.add_argument(
        "--site",
        type=str,
        default=None,
        help="Site label (default: from file)"
    )
    parser_render.add_argument(
        "--source",
        type=str,
        default=None,
        help="Data source label (default: from file)"
    )
    parser_render.add_argument(
        "--output",
        type=str,
        help="Output file path (default: SkewT-{site}-{source}.png in --output-dir)"
    )
    parser_render.add_argument(
        "--output-dir",
        type=str,
        help="Output directory when --output is not given"
    )
    parser_render.add_argument(
        "--format",
        choices=["png", "svg"],
        default="png",
        help="Output format (default: png)"
    )
    parser_render.add_argument(
        "--width",
        type=int,
        help="Diagram width in pixels"
    )
    parser_render.add_argument(
        "--height",
        type=int,
        help="Diagram height in pixels"
    )
    parser_render.add_argument(
        "--dpi",
        type=int,
        help="Output DPI"
    )
    parser_render.add_argument(
        "--background-color",
        type=str,
        default=None,
        help="Figure background color (Matplotlib color spec)"
    )
    parser_render.set_defaults(func=cmd_render)

    # ========================================================================
    # probe subcommand
    # ========================================================================
    parser_probe = subparsers.add_parser(
        "probe",
        help="Print the readout of the sample nearest to a pressure level"
    )
    _add_common_globalish_args(parser_probe, subcommand=True)
    parser_probe.add_argument(
        "--input",
        type=str,
        required=True,
        help="Sounding file (JSON or YAML)"
    )
    position = parser_probe.add_mutually_exclusive_group(required=True)
    position.add_argument(
        "--pressure",
        type=float,
        help="Probe pressure in hPa"
    )
    position.add_argument(
        "--y",
        type=float,
        help="Probe position in plot pixels from the top of the plot"
    )
    parser_probe.set_defaults(func=cmd_probe)

    # Parse arguments
    args = parser.parse_args(argv)

    # Check if subcommand was provided
    if not hasattr(args, 'func'):
        parser.print_help()
        return 1

    # Setup logging
    setup_logging_from_args(args)

    # Execute subcommand
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
