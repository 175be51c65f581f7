import logging
from typing import Iterable, Optional, Sequence

from streamstats.cli.schemas import Report, StatisticLine
from streamstats.observability.metrics import VALUES_INGESTED
from streamstats.services.accumulators import Accumulator, default_accumulators

logger = logging.getLogger(__name__)


def analyze(
    values: Iterable[float],
    accumulators: Optional[Sequence[Accumulator]] = None,
) -> Report:
    """
    Forward every value to every accumulator, in arrival order, then collect
    each accumulator's result in construction order.
    Errors raised while iterating `values` propagate before any result is built.
    """
    if accumulators is None:
        accumulators = default_accumulators()
    count = 0
    for value in values:
        for accumulator in accumulators:
            accumulator.ingest(value)
        count += 1
        VALUES_INGESTED.inc()
    logger.debug("Ingested %d values into %d accumulators", count, len(accumulators))
    return Report(
        lines=[StatisticLine(label=a.label(), value=a.result()) for a in accumulators],
        count=count,
    )
