"""BDD step definitions for accumulator features."""

from dataclasses import dataclass, field
from typing import Any

import pytest
from pytest_bdd import given, parsers, then, when

from emfmetrics.core.accumulator import MetricAccumulator
from emfmetrics.core.encoding.emf import encode_event


@dataclass
class AccumulatorScenarioContext:
    """Mutable state shared between the steps of one scenario."""

    accumulator: MetricAccumulator | None = None
    document: dict[str, Any] = field(default_factory=dict)


def _split(csv: str) -> list[str]:
    return csv.split(",") if csv else []


@pytest.fixture
def ctx() -> AccumulatorScenarioContext:
    """Fresh scenario context for each test."""
    return AccumulatorScenarioContext()


# === Background Steps ===
@given(parsers.parse('an accumulator for namespace "{namespace}"'))
def step_accumulator(ctx: AccumulatorScenarioContext, namespace: str) -> None:
    ctx.accumulator = MetricAccumulator(namespace)


# === Mutation Steps ===
@when(parsers.parse('dimensions "{kv}" are added'))
def when_dimensions_added(ctx: AccumulatorScenarioContext, kv: str) -> None:
    ctx.accumulator.add_dimension(*_split(kv))


@when(parsers.parse("{n:d} dimensions are added in one set"))
def when_many_dimensions_added(ctx: AccumulatorScenarioContext, n: int) -> None:
    kv = [item for i in range(n) for item in (f"dim{i}", f"value{i}")]
    ctx.accumulator.add_dimension(*kv)


@when(
    parsers.parse(
        'metric "{name}" is recorded in "{unit}" with values "{values}"'
    )
)
def when_metric_recorded(
    ctx: AccumulatorScenarioContext, name: str, unit: str, values: str
) -> None:
    ctx.accumulator.add_metric(name, unit, *(float(v) for v in _split(values)))


@when(parsers.parse('metric "{name}" is recorded in "{unit}" with {n:d} values'))
def when_metric_recorded_n_times(
    ctx: AccumulatorScenarioContext, name: str, unit: str, n: int
) -> None:
    ctx.accumulator.add_metric(name, unit, *range(n))


@when(parsers.parse('properties "{kv}" are added'))
def when_properties_added(ctx: AccumulatorScenarioContext, kv: str) -> None:
    ctx.accumulator.add_properties(*_split(kv))


@when("the event is encoded")
def when_event_encoded(ctx: AccumulatorScenarioContext) -> None:
    ctx.document = encode_event(ctx.accumulator, timestamp=1.0)


# === Assertion Steps ===
@then(parsers.parse("there should be {n:d} dimension sets"))
def then_dimension_set_count(ctx: AccumulatorScenarioContext, n: int) -> None:
    assert len(ctx.accumulator.dimension_sets) == n


@then(parsers.parse('dimension set {index:d} should map "{key}" to "{value}"'))
def then_dimension_maps(
    ctx: AccumulatorScenarioContext, index: int, key: str, value: str
) -> None:
    assert ctx.accumulator.dimension_sets[index][key] == value


@then(parsers.parse('dimension set {index:d} should map "{key}" to ""'))
def then_dimension_maps_empty(
    ctx: AccumulatorScenarioContext, index: int, key: str
) -> None:
    assert ctx.accumulator.dimension_sets[index][key] == ""


@then(parsers.parse('dimension set {index:d} should not contain "{key}"'))
def then_dimension_lacks(
    ctx: AccumulatorScenarioContext, index: int, key: str
) -> None:
    assert key not in ctx.accumulator.dimension_sets[index]


@then(parsers.parse('metric "{name}" should have unit "{unit}"'))
def then_metric_unit(ctx: AccumulatorScenarioContext, name: str, unit: str) -> None:
    assert ctx.accumulator.metrics[name].unit == unit


@then(parsers.parse('metric "{name}" should have values "{values}"'))
def then_metric_values(
    ctx: AccumulatorScenarioContext, name: str, values: str
) -> None:
    expected = tuple(float(v) for v in _split(values))
    assert ctx.accumulator.metrics[name].values == expected


@then(parsers.parse('property "{key}" should be "{value}"'))
def then_property_value(
    ctx: AccumulatorScenarioContext, key: str, value: str
) -> None:
    assert ctx.accumulator.properties[key] == value


@then(parsers.parse("the encoded dimension set should have {n:d} keys"))
def then_encoded_dimension_keys(ctx: AccumulatorScenarioContext, n: int) -> None:
    directive = ctx.document["_aws"]["CloudWatchMetrics"][0]
    assert len(directive["Dimensions"][0]) == n


@then(parsers.parse('the encoded metric "{name}" should have {n:d} values'))
def then_encoded_metric_values(
    ctx: AccumulatorScenarioContext, name: str, n: int
) -> None:
    assert len(ctx.document[name]) == n
