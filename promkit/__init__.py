"""Data model and helpers for monitoring tools: labels, fingerprints, alerts, silences, time values, logging and static file serving."""

__version__ = "0.1.0"

__all__ = [
    "alert",
    "fingerprinting",
    "fnv",
    "labels",
    "labelset",
    "logflags",
    "metric",
    "promlog",
    "signature",
    "silence",
    "static",
    "times",
    "version",
]