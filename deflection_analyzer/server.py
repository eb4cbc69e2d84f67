"""Batch orchestration and static file serving.

Flow:
  1. wipe and recreate the output directory
  2. for each category (cup, then faceplate), for each run discovered 1, 2, 3, ...
     until a gap: load, reduce, assemble and write '<category>_run_<n>.html'
  3. write an index page summarizing every run
  4. serve the output directory over HTTP until interrupted

Every run yields a :class:`RunOutcome`.  With the default ``"abort"`` policy the
first failing run stops the batch (its error is re-raised); with ``"skip"``
the failure is recorded and the batch continues.
"""

from __future__ import annotations

import functools
import html
import logging
import shutil
from dataclasses import dataclass
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Any, List, Optional, Sequence

import pandas as pd

from deflection_analyzer.analysis.pipeline import reduce_run
from deflection_analyzer.config import AnalyzerConfig
from deflection_analyzer.errors import AnalyzerError, OutputWriteError
from deflection_analyzer.ingest.discovery import discover_runs, list_data_files
from deflection_analyzer.models.catalog import CATEGORIES
from deflection_analyzer.models.sample import RunSample
from deflection_analyzer.presentation.render_html import write_report
from deflection_analyzer.presentation.report import build_run_report

logger = logging.getLogger(__name__)

INDEX_NAME = "index.html"


@dataclass(frozen=True)
class RunOutcome:
    """Result of processing one run: an output page or a categorized error."""
    category: str
    run_number: int
    output_path: Optional[Path] = None
    sample: Optional[RunSample] = None
    error: Optional[AnalyzerError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def name(self) -> str:
        return f"{self.category}_run_{self.run_number}"


def prepare_output_dir(path: str | Path) -> Path:
    """Remove *path* with everything in it and create it empty."""
    out = Path(path)
    try:
        if out.exists():
            shutil.rmtree(out)
        out.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputWriteError(out, str(exc)) from exc
    return out


def process_run(listing: Sequence[str], category: str, run_number: int, config: AnalyzerConfig) -> RunOutcome:
    """Load, reduce, assemble and write one run.  Errors propagate."""
    sample = reduce_run(listing, category, run_number, config.n, config.data_dir)
    report = build_run_report(sample, config.fit_sample_count(category))
    path = write_report(report, config.output_dir)
    return RunOutcome(category=category, run_number=run_number, output_path=path, sample=sample)


def build_reports(config: AnalyzerConfig) -> List[RunOutcome]:
    """Write one page per discovered run and the index page.

    Raises
    ------
    DirectoryAccessError
        Always, whatever the error policy, when the data directory cannot be read.
    AnalyzerError
        The first run failure when ``config.error_policy == "abort"``.
    """
    prepare_output_dir(config.output_dir)
    listing = list_data_files(config.data_dir)

    outcomes: List[RunOutcome] = []
    for category in CATEGORIES:
        for run_number in discover_runs(listing, category):
            try:
                outcome = process_run(listing, category, run_number, config)
            except AnalyzerError as exc:
                if config.error_policy == "abort":
                    raise
                logger.warning("skipping %s_run_%d: %s", category, run_number, exc)
                outcome = RunOutcome(category=category, run_number=run_number, error=exc)
            outcomes.append(outcome)

    write_index(outcomes, config.output_dir)
    n_ok = sum(o.ok for o in outcomes)
    logger.info("processed %d run(s): %d written, %d failed", len(outcomes), n_ok, len(outcomes) - n_ok)
    return outcomes


def summary_table(outcomes: Sequence[RunOutcome]) -> pd.DataFrame:
    """One row per run: identifiers, sample counts and Gaussian parameters."""
    rows: List[dict[str, Any]] = []
    for o in outcomes:
        row: dict[str, Any] = {"category": o.category, "run": o.run_number, "page": o.name}
        if o.sample is not None:
            for key, pol in (("deflected", o.sample.deflected), ("undeflected", o.sample.undeflected)):
                row[f"{key}_samples"] = pol.raw.n_samples
                row[f"{key}_mean"] = pol.params.mean
                row[f"{key}_sigma"] = pol.params.sigma
        row["error"] = "" if o.ok else str(o.error)
        rows.append(row)
    columns = [
        "category", "run", "page",
        "deflected_samples", "deflected_mean", "deflected_sigma",
        "undeflected_samples", "undeflected_mean", "undeflected_sigma",
        "error",
    ]
    return pd.DataFrame(rows, columns=columns)


def write_index(outcomes: Sequence[RunOutcome], output_dir: str | Path) -> Path:
    """Write 'index.html' linking every written page."""
    df = summary_table(outcomes)
    df["error"] = df["error"].map(lambda s: html.escape(str(s)))
    ok = {o.name for o in outcomes if o.ok}
    df["page"] = df["page"].map(
        lambda name: f'<a href="{name}.html">{name}</a>' if name in ok else html.escape(name)
    )
    table = df.to_html(index=False, escape=False, na_rep="", float_format=lambda v: f"{v:.6g}")
    page = (
        "<!DOCTYPE html>\n<html lang=\"en\">\n<head>\n<meta charset=\"utf-8\">\n"
        "<title>Deflection runs</title>\n</head>\n<body>\n<h1>Deflection runs</h1>\n"
        f"{table}\n</body>\n</html>\n"
    )
    path = Path(output_dir) / INDEX_NAME
    try:
        path.write_text(page, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(path, str(exc)) from exc
    return path


class RequestLoggingHandler(SimpleHTTPRequestHandler):
    """Static file handler that logs '<remote addr> <method> <path>' per request.

    Every request that parses is logged, whatever its method.  Only GET and
    HEAD are implemented; any other method answers 501.
    """

    def parse_request(self) -> bool:
        if not super().parse_request():
            return False
        host, port = self.client_address[:2]
        logger.info("%s:%s %s %s", host, port, self.command, self.path)
        return True

    def log_message(self, format: str, *args: Any) -> None:  # noqa: A002
        logger.debug(format, *args)


def make_server(directory: str | Path, host: str = "localhost", port: int = 8089) -> ThreadingHTTPServer:
    """Bind a threading static file server on *directory* (port 0 picks a free port)."""
    handler = functools.partial(RequestLoggingHandler, directory=str(Path(directory)))
    return ThreadingHTTPServer((host, int(port)), handler)


def serve(directory: str | Path, host: str = "localhost", port: int = 8089) -> None:
    """Serve *directory* until interrupted."""
    server = make_server(directory, host, port)
    bound_host, bound_port = server.server_address[:2]
    logger.info("running server at http://%s:%s", host or bound_host, bound_port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("server stopped")
    finally:
        server.server_close()


def run(config: AnalyzerConfig) -> List[RunOutcome]:
    """Build every report, then serve the output directory forever."""
    outcomes = build_reports(config)
    serve(config.output_dir, config.host, config.port)
    return outcomes
