"""Core domain models for embedded metric events."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MetricRecord:
    """A named, unit-tagged series of values recorded within one event.

    Attributes:
        key: Metric name (e.g., ExecutionTime).
        unit: Unit symbol fixed when the metric was first recorded.
        values: Observed values in recording order.
    """

    key: str
    unit: str
    values: tuple[float, ...] = ()

    def extend(self, values: tuple[float, ...]) -> "MetricRecord":
        """Return a copy with values appended. The unit is kept."""
        return MetricRecord(key=self.key, unit=self.unit, values=self.values + values)


@dataclass(frozen=True)
class EmfSnapshot:
    """Finalized state of a MetricAccumulator.

    Attributes:
        namespace: Metric namespace the event belongs to.
        dimension_sets: Dimension sets in the order they were added.
        metrics: Metric records keyed by name, in insertion order.
        properties: Contextual key/value pairs for the document root.
    """

    namespace: str
    dimension_sets: tuple[dict[str, str], ...] = ()
    metrics: dict[str, MetricRecord] = field(default_factory=dict)
    properties: dict[str, str] = field(default_factory=dict)
