import logging
import sys
import time
from typing import Optional, TextIO

from streamstats.cli.report import analyze
from streamstats.observability.logging import setup_logging
from streamstats.observability.metrics import INVALID_INPUT, RUN_DURATION, render_metrics
from streamstats.services.tokens import InvalidInputError, read_values

# Single diagnostic line written to stderr on malformed input
INVALID_INPUT_MESSAGE = "Invalid input data"

logger = logging.getLogger(__name__)


def run(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """
    Read numbers from `stdin`, print one "<label> = <value>" line per statistic to `stdout`.
    Raises InvalidInputError on the first malformed token; nothing is printed in that case.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    started_at = time.perf_counter()
    try:
        report = analyze(read_values(stdin))
    except InvalidInputError as exc:
        INVALID_INPUT.inc()
        RUN_DURATION.labels("invalid_input").observe(time.perf_counter() - started_at)
        logger.debug("Rejected input: %s", exc)
        raise
    stdout.write(report.render())
    stdout.flush()
    RUN_DURATION.labels("ok").observe(time.perf_counter() - started_at)
    logger.info("Reported %d statistics over %d values", len(report.lines), report.count)


def main() -> None:
    """Console entry point: exit 0 on success, 1 with a diagnostic on malformed input."""
    setup_logging()
    try:
        run()
    except InvalidInputError:
        sys.exit(INVALID_INPUT_MESSAGE)
    finally:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Run metrics:\n%s", render_metrics())


if __name__ == "__main__":
    main()
