"""Function handler that emits one embedded metric event per invocation."""

import logging
import random
import time
import uuid

from emfmetrics import MetricAccumulator, Unit, dumps, timed

logging.basicConfig(level=logging.INFO)


def handler(event: dict[str, str]) -> dict[str, int]:
    """Process an order and print its metrics as a structured log line."""
    metrics = MetricAccumulator("checkout-service")
    metrics.add_dimension("FunctionVersion", "$LATEST")
    metrics.add_dimension("FunctionVersion", "$LATEST", "Region", "eu-west-1")
    metrics.add_properties("requestId", str(uuid.uuid4()), "orderId", event["order_id"])

    with timed(metrics, "ProcessingTime"):
        items = random.randint(1, 5)
        for _ in range(items):
            with timed(metrics, "ItemLatency", Unit.MICROSECONDS):
                time.sleep(random.uniform(0.001, 0.01))

    metrics.add_metric("ItemsProcessed", Unit.COUNT, items)

    # The ingestion pipeline picks the event up from stdout
    print(dumps(metrics))
    return {"statusCode": 200}


if __name__ == "__main__":
    handler({"order_id": "A-1001"})
