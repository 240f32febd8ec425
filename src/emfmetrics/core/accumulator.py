"""Accumulator for a single embedded metric format event.

One MetricAccumulator is created per emitted event, mutated freely while the
unit of work runs, then handed to an encoder. Mutators never fail: malformed
input is resolved by a fixed default instead of raising, so recording metrics
cannot break the caller's workload. Structural limits (dimensions per set,
metrics per event, values per metric) are enforced by the encoder.

Instances are not thread-safe; concurrent tasks should each own one.
"""

import time
from collections.abc import Generator, Mapping
from contextlib import contextmanager
from types import MappingProxyType

from emfmetrics.core.models import EmfSnapshot, MetricRecord
from emfmetrics.core.pairs import iter_pairs, pairs_to_dict
from emfmetrics.core.units import Unit


class MetricAccumulator:
    """Collects dimensions, metrics and properties for one namespace.

    Example:
        ```python
        from emfmetrics import MetricAccumulator, Unit, dumps

        acc = MetricAccumulator("checkout-service")
        acc.add_dimension("FunctionVersion", "$LATEST")
        acc.add_metric("ExecutionTime", Unit.MILLISECONDS, 12.5)
        acc.add_properties("requestId", "9d0ff7b8")
        print(dumps(acc))
        ```
    """

    def __init__(self, namespace: str) -> None:
        """Create an empty accumulator.

        Args:
            namespace: Metric namespace. Passed through without validation.
        """
        self._namespace = namespace
        self._dimension_sets: list[dict[str, str]] = []
        self._metrics: dict[str, MetricRecord] = {}
        self._properties: dict[str, str] = {}

    def __repr__(self) -> str:
        return (
            f"MetricAccumulator(namespace={self._namespace!r}, "
            f"dimension_sets={len(self._dimension_sets)}, "
            f"metrics={len(self._metrics)}, properties={len(self._properties)})"
        )

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def dimension_sets(self) -> tuple[Mapping[str, str], ...]:
        """Read-only views of the dimension sets, in insertion order."""
        return tuple(MappingProxyType(dims) for dims in self._dimension_sets)

    @property
    def metrics(self) -> Mapping[str, MetricRecord]:
        """Read-only view of metric records keyed by name."""
        return MappingProxyType(self._metrics)

    @property
    def properties(self) -> Mapping[str, str]:
        """Read-only view of properties keyed by name."""
        return MappingProxyType(self._properties)

    def add_dimension(self, *kv: str) -> None:
        """Append a new dimension set built from key/value pairs.

        Each call adds one independent set; earlier sets are never merged or
        modified. Every unique key/value combination is projected as its own
        time series, so high-cardinality values belong in properties instead.

        A key supplied without a value maps to "". Sets longer than the
        dimension limit are truncated by the encoder, not here.

        Args:
            *kv: Alternating dimension keys and values.
        """
        if not kv:
            return
        self._dimension_sets.append(pairs_to_dict(kv))

    def add_metric(self, name: str, unit: Unit | str, *values: float) -> None:
        """Add a metric or append values to an existing one.

        The unit recorded by the first call for a name is kept; the unit
        argument of later calls for the same name is ignored.

        Args:
            name: Metric name.
            unit: Unit of the values. Unknown unit strings are accepted.
            *values: Values to append. May be empty.
        """
        observed = tuple(float(value) for value in values)
        record = self._metrics.get(name)
        if record is None:
            self._metrics[name] = MetricRecord(key=name, unit=unit, values=observed)
        elif observed:
            self._metrics[name] = record.extend(observed)

    def add_properties(self, *kv: str) -> None:
        """Set root-level properties from key/value pairs.

        Properties are searchable in the log but are not projected as
        metrics. A key written more than once keeps its latest value; a key
        supplied without a value maps to "".

        Args:
            *kv: Alternating property keys and values.
        """
        for key, value in iter_pairs(kv):
            self._properties[key] = value

    def export(self) -> EmfSnapshot:
        """Return a snapshot of the current state.

        The snapshot is independent of the accumulator: later mutations are
        not reflected in it.
        """
        return EmfSnapshot(
            namespace=self._namespace,
            dimension_sets=tuple(dict(dims) for dims in self._dimension_sets),
            metrics=dict(self._metrics),
            properties=dict(self._properties),
        )


def new_accumulator(namespace: str) -> MetricAccumulator:
    """Create a blank accumulator for the given namespace."""
    return MetricAccumulator(namespace)


_UNIT_SCALE = {
    Unit.SECONDS: 1.0,
    Unit.MILLISECONDS: 1_000.0,
    Unit.MICROSECONDS: 1_000_000.0,
}


@contextmanager
def timed(
    accumulator: MetricAccumulator,
    name: str,
    unit: Unit | str = Unit.MILLISECONDS,
) -> Generator[None]:
    """Context manager that records the elapsed time of its block.

    The elapsed time is recorded even if the block raises.

    Args:
        accumulator: Accumulator receiving the value.
        name: Metric name.
        unit: Seconds, Milliseconds or Microseconds. Any other unit records
            seconds under that unit. Ignored if the metric already exists:
            the value is scaled to the unit it was first recorded with.
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        existing = accumulator.metrics.get(name)
        if existing is not None:
            unit = existing.unit
        accumulator.add_metric(name, unit, elapsed * _UNIT_SCALE.get(unit, 1.0))
