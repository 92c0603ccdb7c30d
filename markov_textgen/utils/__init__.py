"""Support code around the core model: config, logging, corpus input and persistence."""
