"""Application layer: ports that formatters, records and sinks plug into."""
