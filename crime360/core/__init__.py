"""Record store, incident search and aggregation engines."""
