"""Middleware data types: durations, QoS profiles, events, options and topic endpoint info."""

__version__ = "0.1.0"