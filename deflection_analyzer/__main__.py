from __future__ import annotations

import logging
from typing import Optional, Sequence

from deflection_analyzer.config import AnalyzerConfig
from deflection_analyzer.errors import AnalyzerError

logger = logging.getLogger("deflection_analyzer")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def main(argv: Optional[Sequence[str]] = None) -> int:
    import argparse
    import textwrap

    p = argparse.ArgumentParser(
        prog="python -m deflection_analyzer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=textwrap.dedent(
            """\
            Compare deflected and undeflected current measurements per run.

            Data files are read from ./data and must be named
            cup(faceplate)_deflected(undeflected)_<run>_...
            One page per run is written to ./data/html (wiped first) and the
            directory is then served at http://localhost:8089.
            """
        ),
    )
    p.add_argument("-n", type=int, default=10, help="clustering value for time average (default: 10)")

    ns = p.parse_args(list(argv) if argv is not None else None)

    configure_logging()
    try:
        cfg = AnalyzerConfig(n=ns.n)
    except ValueError as exc:
        p.error(str(exc))

    # Deferred so that '--help' does not import matplotlib/pandas.
    from deflection_analyzer.server import run

    try:
        run(cfg)
    except AnalyzerError as exc:
        logger.critical("%s", exc)
        return 1
    except OSError as exc:
        # only binding the port raises a bare OSError here
        logger.critical("cannot start server at %s: %s", cfg.server_url, exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
