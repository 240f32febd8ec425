"""Document encoders for embedded metric events."""
