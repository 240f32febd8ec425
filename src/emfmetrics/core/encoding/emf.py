"""Encoder for CloudWatch embedded metric format documents.

Turns an EmfEventView into the JSON shape the log-ingestion pipeline parses:

    {
        "_aws": {
            "Timestamp": 1702300000000,
            "CloudWatchMetrics": [
                {"Namespace": "...", "Dimensions": [["k1", "k2"]],
                 "Metrics": [{"Name": "m", "Unit": "Seconds"}]}
            ]
        },
        "k1": "v1", "k2": "v2", "m": [1.0, 2.0], "requestId": "..."
    }

This is also where the format's structural limits are enforced.
"""

import json
import logging
import math
import time
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from emfmetrics.core.models import MetricRecord
from emfmetrics.core.ports import EmfEventView
from emfmetrics.core.units import is_known_unit

logger = logging.getLogger(__name__)

_METADATA_KEY = "_aws"


class EmfLimitError(ValueError):
    """Raised in strict mode when an event exceeds a format limit.

    Also raised for NaN or infinite metric values, which JSON cannot carry.
    """


@dataclass(frozen=True)
class EmfLimits:
    """Structural limits of an embedded metric document.

    Attributes:
        max_dimensions: Keys kept per dimension set.
        max_metrics: Distinct metric names kept per event.
        max_values: Values kept per metric.
    """

    max_dimensions: int = 9
    max_metrics: int = 150
    max_values: int = 100

    def __post_init__(self) -> None:
        for name in ("max_dimensions", "max_metrics", "max_values"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if value < 1:
                raise ValueError(f"{name} must be positive, got {value}")


DEFAULT_LIMITS = EmfLimits()


def _over_limit(strict: bool, message: str, action: str = "truncating") -> None:
    if strict:
        raise EmfLimitError(message)
    logger.warning("%s; %s", message, action)


def _is_reserved(key: str) -> bool:
    if key != _METADATA_KEY:
        return False
    logger.warning("Dropping member %r reserved for metadata", key)
    return True


def _finite_values(record: MetricRecord, strict: bool) -> list[float]:
    values = [value for value in record.values if math.isfinite(value)]
    dropped = len(record.values) - len(values)
    if dropped:
        _over_limit(
            strict,
            f"metric {record.key!r} has {dropped} non-finite values",
            "dropping them",
        )
    return values


def encode_event(
    event: EmfEventView,
    *,
    timestamp: float | None = None,
    limits: EmfLimits = DEFAULT_LIMITS,
    strict: bool = False,
) -> dict[str, Any]:
    """Build the embedded metric document for one event.

    Args:
        event: Accumulator or snapshot to encode.
        timestamp: Unix timestamp in seconds. Defaults to now.
        limits: Structural limits to enforce.
        strict: Raise EmfLimitError instead of truncating.

    Returns:
        JSON-serializable dict. Properties, dimension values and metric
        values share the document root, later ones winning on collision.
        NaN and infinite values are dropped; metrics left without values
        are omitted. A member named "_aws" is dropped so it cannot replace
        the metadata block.

    Raises:
        EmfLimitError: If strict is set and a limit is exceeded or a value
            is not finite.
    """
    if timestamp is None:
        timestamp = time.time()

    dimension_keys: list[list[str]] = []
    dimension_values: dict[str, str] = {}
    for index, dims in enumerate(event.dimension_sets):
        keys = [key for key in dims if not _is_reserved(key)]
        if len(keys) > limits.max_dimensions:
            _over_limit(
                strict,
                f"dimension set {index} has {len(keys)} keys, "
                f"limit is {limits.max_dimensions}",
            )
            keys = keys[: limits.max_dimensions]
        dimension_keys.append(keys)
        for key in keys:
            dimension_values[key] = dims[key]

    observed = [
        (record, values)
        for record in event.metrics.values()
        if not _is_reserved(record.key)
        and (values := _finite_values(record, strict))
    ]
    if len(observed) > limits.max_metrics:
        _over_limit(
            strict,
            f"event has {len(observed)} metrics, limit is {limits.max_metrics}",
        )
        observed = observed[: limits.max_metrics]

    definitions: list[dict[str, str]] = []
    metric_values: dict[str, float | list[float]] = {}
    for record, values in observed:
        if len(values) > limits.max_values:
            _over_limit(
                strict,
                f"metric {record.key!r} has {len(values)} values, "
                f"limit is {limits.max_values}",
            )
            values = values[: limits.max_values]
        if not is_known_unit(record.unit):
            logger.debug("Metric %r uses non-standard unit %r", record.key, record.unit)
        definitions.append({"Name": record.key, "Unit": str(record.unit)})
        metric_values[record.key] = values[0] if len(values) == 1 else values

    members: dict[str, Any] = {
        key: value
        for key, value in event.properties.items()
        if not _is_reserved(key)
    }
    members.update(dimension_values)
    members.update(metric_values)

    return {
        _METADATA_KEY: {
            "Timestamp": int(timestamp * 1000),
            "CloudWatchMetrics": [
                {
                    "Namespace": event.namespace,
                    "Dimensions": dimension_keys,
                    "Metrics": definitions,
                }
            ],
        },
        **members,
    }


def dumps(event: EmfEventView, **kwargs: Any) -> str:
    """Encode one event as a compact JSON string.

    Accepts the same keyword arguments as encode_event.
    """
    return json.dumps(
        encode_event(event, **kwargs), separators=(",", ":"), allow_nan=False
    )


def encode_events(events: Iterable[EmfEventView], **kwargs: Any) -> str:
    """Encode events to newline-delimited JSON.

    Returns:
        NDJSON string with one document per line.
        Empty string if no events.
    """
    lines = [dumps(event, **kwargs) for event in events]

    if not lines:
        return ""

    return "\n".join(lines) + "\n"
