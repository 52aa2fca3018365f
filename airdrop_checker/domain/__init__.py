"""Domain Layer: models, interfaces and events with no I/O of their own."""
