"""Port interface between the accumulator and document encoders.

Encoders depend only on this protocol, not on MetricAccumulator itself,
so a live accumulator and an exported snapshot can be encoded alike.
"""

from collections.abc import Mapping, Sequence
from typing import Protocol, runtime_checkable

from emfmetrics.core.models import MetricRecord


@runtime_checkable
class EmfEventView(Protocol):
    """Read-only view of one embedded metric event.

    Implemented by MetricAccumulator and EmfSnapshot.
    """

    @property
    def namespace(self) -> str:
        """Metric namespace."""
        ...

    @property
    def dimension_sets(self) -> Sequence[Mapping[str, str]]:
        """Dimension sets in insertion order."""
        ...

    @property
    def metrics(self) -> Mapping[str, MetricRecord]:
        """Metric records keyed by name."""
        ...

    @property
    def properties(self) -> Mapping[str, str]:
        """Contextual properties keyed by name."""
        ...
