"""emfmetrics - build CloudWatch embedded metric format log events."""

from emfmetrics.core.accumulator import MetricAccumulator, new_accumulator, timed
from emfmetrics.core.encoding.emf import (
    DEFAULT_LIMITS,
    EmfLimitError,
    EmfLimits,
    dumps,
    encode_event,
    encode_events,
)
from emfmetrics.core.models import EmfSnapshot, MetricRecord
from emfmetrics.core.ports import EmfEventView
from emfmetrics.core.units import Unit

__all__ = [
    "DEFAULT_LIMITS",
    "EmfEventView",
    "EmfLimitError",
    "EmfLimits",
    "EmfSnapshot",
    "MetricAccumulator",
    "MetricRecord",
    "Unit",
    "dumps",
    "encode_event",
    "encode_events",
    "new_accumulator",
    "timed",
]
