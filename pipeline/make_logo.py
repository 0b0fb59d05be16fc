"""
Make Logo

Sorts the rows of a Walsh matrix file by sequency and writes the grid logo
(logo1.png) and the demo logo (logo.png).
"""

import sys
import argparse
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from pipeline.base import LogoConfig, LogoPipeline, LogoPipelineError, PARSE_FAILURE_POLICIES


def build_config(args: argparse.Namespace) -> LogoConfig:
    """Create a config from a YAML file, then apply command line overrides."""
    if args.config:
        config = LogoConfig.from_yaml(args.config)
    else:
        config = LogoConfig()

    overrides = {
        "matrix_file": args.matrix,
        "output_dir": args.output_dir,
        "logo_size": args.logo_size,
        "parse_failure_policy": args.on_parse_failure,
        "profile_plot": args.profile_plot,
        "results_file": args.results_file,
    }
    data = config.to_dict()
    data.update({k: v for k, v in overrides.items() if v is not None})
    if args.verbose:
        data["verbose"] = True

    return LogoConfig(**data)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a sequency-ordered Walsh matrix logo")
    parser.add_argument("--config", type=str, help="Path to config YAML")
    parser.add_argument("--matrix", type=str, help="Matrix text file (default: walsh.txt)")
    parser.add_argument("--output-dir", type=str, help="Directory for the PNG files")
    parser.add_argument("--logo-size", type=int, help="Grid logo size in pixels (default: 128)")
    parser.add_argument("--on-parse-failure", choices=PARSE_FAILURE_POLICIES,
                        help="What to do with tokens that are not integers")
    parser.add_argument("--profile-plot", type=str, help="Also save a sequency plot")
    parser.add_argument("--results-file", type=str, help="Also save a JSON run summary")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    try:
        config = build_config(args)
    except (OSError, ValueError, TypeError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(2)

    pipeline = LogoPipeline(config)
    try:
        pipeline.run()
    except LogoPipelineError:
        sys.exit(1)


if __name__ == "__main__":
    main()
