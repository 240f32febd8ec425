"""Core domain: units, models and the metric accumulator."""
