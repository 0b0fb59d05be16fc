"""
Logo Pipeline

Loads the Walsh matrix, sorts it by sequency and writes the grid and demo
logos.
"""

import json
import yaml
import logging
import matplotlib.pyplot as plt
from PIL import Image
from dataclasses import dataclass, field, asdict
from typing import Dict, Any, List, Optional, Tuple
from pathlib import Path

from walsh.codes import WalshMatrix, get_code_properties
from walsh.loader import LoadResult, load_walsh_matrix
from walsh.utils import Timer, ensure_parent_dir, format_time
from rendering.grid import (
    render_logo,
    save_png,
    cell_size,
    NEGATIVE_COLOR,
    POSITIVE_COLOR,
    DEFAULT_LOGO_SIZE,
)
from rendering.canvas import Canvas, draw_demo
from rendering.plots import plot_sequency_profile

PARSE_FAILURE_POLICIES = ("warn", "ignore", "abort")


@dataclass
class LogoConfig:
    """Configuration for a logo run."""
    # Input
    matrix_file: str = "walsh.txt"
    parse_failure_policy: str = "warn"

    # Grid logo
    logo_size: int = DEFAULT_LOGO_SIZE
    negative_color: List[int] = field(default_factory=lambda: list(NEGATIVE_COLOR))
    positive_color: List[int] = field(default_factory=lambda: list(POSITIVE_COLOR))

    # Demo logo
    demo_size: int = 100

    # Outputs
    output_dir: str = "."
    grid_output: str = "logo1.png"
    demo_output: str = "logo.png"
    profile_plot: Optional[str] = None
    results_file: Optional[str] = None

    # Logging
    logger_name: str = "walsh_logo"
    verbose: bool = False

    def __post_init__(self):
        if self.parse_failure_policy not in PARSE_FAILURE_POLICIES:
            raise ValueError(
                f"parse_failure_policy={self.parse_failure_policy!r} not in {PARSE_FAILURE_POLICIES}"
            )
        if self.logo_size < 1:
            raise ValueError(f"logo_size={self.logo_size} must be positive")
        for name in ("negative_color", "positive_color"):
            color = getattr(self, name)
            if len(color) != 4:
                raise ValueError(f"{name} must have 4 RGBA components, got {color}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_yaml(cls, path: str) -> "LogoConfig":
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def save(self, path: str):
        ensure_parent_dir(path)
        with open(path, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)


class LogoPipelineError(RuntimeError):
    """The run cannot produce its images."""


class LogoPipeline:
    """Matrix load, sequency sort and logo rendering."""

    def __init__(self, config: LogoConfig):
        self.config = config
        self.results = {}
        self.failures = []
        self.logger = self._setup_logging()
        self.output_path = Path(config.output_dir)

    def _setup_logging(self) -> logging.Logger:
        """Set up logging for the run."""
        logger = logging.getLogger(self.config.logger_name)
        level = logging.DEBUG if self.config.verbose else logging.INFO
        logger.setLevel(level)

        if not logger.handlers:
            ch = logging.StreamHandler()
            ch.setLevel(logging.DEBUG)
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            ch.setFormatter(formatter)
            logger.addHandler(ch)

        return logger

    def load_matrix(self) -> WalshMatrix:
        """
        Load the configured matrix file and apply the parse failure policy.

        Raises:
            LogoPipelineError: If the file is unreadable, or if tokens failed
                to parse under the 'abort' policy
        """
        self.logger.info(f"Loading matrix: {self.config.matrix_file}")
        result = load_walsh_matrix(self.config.matrix_file)

        if not result.ok:
            self.logger.error(result.error)
            raise LogoPipelineError(result.error)

        self.failures = list(result.failures)
        self._report_failures(result)
        return result.matrix

    def _report_failures(self, result: LoadResult):
        policy = self.config.parse_failure_policy

        for failure in result.failures:
            if policy == "ignore":
                self.logger.debug(str(failure))
            else:
                self.logger.warning(str(failure))

        if result.failures and policy == "abort":
            message = f"{len(result.failures)} token(s) in {result.source} failed to parse"
            self.logger.error(message)
            raise LogoPipelineError(message)

    def run(self) -> Dict[str, Any]:
        """Run the pipeline and return a summary of what was produced."""
        timer = Timer()
        timer.start()

        matrix = self.load_matrix()
        self.logger.info(f"Loaded {len(matrix)} rows")

        unsorted = matrix.sequencies()
        matrix.sort_by_sequency()
        self.logger.debug(f"Sequencies before sort: {unsorted}")
        self.logger.debug(f"Sequencies after sort: {matrix.sequencies()}")

        # Render everything before writing so a failure leaves no output
        try:
            cell = cell_size(self.config.logo_size, len(matrix))
            grid = render_logo(
                matrix,
                logo_size=self.config.logo_size,
                negative_color=tuple(self.config.negative_color),
                positive_color=tuple(self.config.positive_color),
                verbose=self.config.verbose,
            )
        except ValueError as e:
            self.logger.error(f"Can't render matrix: {e}")
            raise LogoPipelineError(str(e)) from e

        demo = draw_demo(Canvas(self.config.demo_size, self.config.demo_size))

        properties = self._code_properties(matrix)

        grid_path = self.output_path / self.config.grid_output
        demo_path = self.output_path / self.config.demo_output
        self._save_outputs([(grid, grid_path), (demo.image, demo_path)])
        self.logger.info(f"Grid logo saved to: {grid_path}")
        self.logger.info(f"Demo logo saved to: {demo_path}")

        results = {
            "matrix_file": self.config.matrix_file,
            "num_rows": len(matrix),
            "cell_size": cell,
            "parse_failures": len(self.failures),
            "sequencies": matrix.sequencies(),
            "outputs": {"grid": str(grid_path), "demo": str(demo_path)},
        }
        if properties is not None:
            results["properties"] = properties

        if self.config.profile_plot:
            plot_path = self.output_path / self.config.profile_plot
            try:
                fig = plot_sequency_profile(matrix, output_path=str(plot_path))
            except OSError as e:
                self.logger.error(f"Can't write sequency plot: {e}")
                raise LogoPipelineError(str(e)) from e
            plt.close(fig)
            results["outputs"]["profile_plot"] = str(plot_path)
            self.logger.info(f"Sequency plot saved to: {plot_path}")

        results["elapsed"] = format_time(timer.stop())

        self.log_summary(results)
        if self.config.results_file:
            self.save_results(results)
        self.results = results

        return results

    def _code_properties(self, matrix: WalshMatrix) -> Optional[Dict[str, Any]]:
        """Code-set statistics, or None if the matrix doesn't support them."""
        if len({len(row) for row in matrix.rows}) != 1:
            self.logger.warning("Rows have different lengths; skipping code properties")
            return None
        try:
            return get_code_properties(matrix)
        except (ValueError, OverflowError) as e:
            self.logger.warning(f"Skipping code properties: {e}")
            return None

    def _save_outputs(self, outputs: List[Tuple[Image.Image, Path]]):
        """
        Save all images, removing the ones already written if any save fails.

        Raises:
            LogoPipelineError: If an image can't be written
        """
        written = []
        try:
            for image, path in outputs:
                save_png(image, str(path))
                written.append(path)
        except OSError as e:
            for path in written:
                path.unlink(missing_ok=True)
            self.logger.error(f"Can't write output: {e}")
            raise LogoPipelineError(str(e)) from e

    def save_results(self, results: Dict[str, Any]):
        """Save the run summary as JSON."""
        results_path = self.output_path / self.config.results_file
        try:
            ensure_parent_dir(str(results_path))
            with open(results_path, 'w') as f:
                json.dump(results, f, indent=2, default=str)
        except OSError as e:
            self.logger.error(f"Can't write results: {e}")
            raise LogoPipelineError(str(e)) from e

        self.logger.info(f"Results saved to: {results_path}")

    def log_summary(self, results: Dict[str, Any]):
        """Log a summary of results."""
        self.logger.info("=" * 60)
        self.logger.info("RUN SUMMARY")
        self.logger.info("=" * 60)

        for key, value in results.items():
            if key == "sequencies":
                continue
            if isinstance(value, dict):
                self.logger.info(f"{key}:")
                for k, v in value.items():
                    if isinstance(v, float):
                        self.logger.info(f"  {k}: {v:.4f}")
                    else:
                        self.logger.info(f"  {k}: {v}")
            else:
                self.logger.info(f"{key}: {value}")

        self.logger.info("=" * 60)
