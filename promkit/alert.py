"""Alerts and lists of alerts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from promkit.fingerprinting import Fingerprint
from promkit.labels import ALERT_NAME_LABEL
from promkit.labelset import LabelSet


class AlertStatus(str, Enum):
    """Whether an alert is firing or resolved."""

    FIRING = "firing"
    RESOLVED = "resolved"

    def __str__(self) -> str:
        return self.value


@dataclass
class Alert:
    """An alert; ``None`` times mean the time is unset."""

    labels: LabelSet = field(default_factory=LabelSet)
    annotations: LabelSet = field(default_factory=LabelSet)
    starts_at: datetime | None = None
    ends_at: datetime | None = None
    generator_url: str = ""

    def __post_init__(self) -> None:
        self.labels = LabelSet(self.labels or {})
        self.annotations = LabelSet(self.annotations or {})

    def name(self) -> str:
        """Return the value of the alertname label."""
        return self.labels.get(ALERT_NAME_LABEL, "")

    def fingerprint(self) -> Fingerprint:
        """Return the fingerprint of the alert's labels."""
        return self.labels.fingerprint()

    def __str__(self) -> str:
        s = f"{self.name()}[{str(self.fingerprint())[:7]}]"
        return s + ("[resolved]" if self.resolved() else "[active]")

    def resolved(self) -> bool:
        """Return True if the alert ended at or before now."""
        if self.ends_at is None:
            return False
        return self.resolved_at(datetime.now(tz=self.ends_at.tzinfo))

    def resolved_at(self, ts: datetime) -> bool:
        """Return True if the alert ended at or before ``ts``."""
        if self.ends_at is None:
            return False
        return not self.ends_at > ts

    def status(self) -> AlertStatus:
        """Return the alert's status."""
        return AlertStatus.RESOLVED if self.resolved() else AlertStatus.FIRING

    def validate(self) -> None:
        """Raise ValueError if the alert data is inconsistent."""
        if self.starts_at is None:
            raise ValueError("start time missing")
        if self.ends_at is not None and self.ends_at < self.starts_at:
            raise ValueError("start time must be before end time")
        try:
            self.labels.validate()
        except ValueError as err:
            raise ValueError(f"invalid label set: {err}") from err
        if not self.labels:
            raise ValueError("at least one label pair required")
        try:
            self.annotations.validate()
        except ValueError as err:
            raise ValueError(f"invalid annotations: {err}") from err


class Alerts(list):
    """A list of alerts."""

    def has_firing(self) -> bool:
        """Return True if any alert is not resolved."""
        return any(not alert.resolved() for alert in self)

    def status(self) -> AlertStatus:
        """Return FIRING if at least one alert is firing."""
        return AlertStatus.FIRING if self.has_firing() else AlertStatus.RESOLVED


def _time_before(x: datetime | None, y: datetime | None) -> bool:
    # An unset time is the earliest possible time.
    if x is None:
        return y is not None
    if y is None:
        return False
    return x < y


def alert_less(a: Alert, b: Alert) -> bool:
    """Chronological ordering of alerts: start, then end, then fingerprint."""
    if _time_before(a.starts_at, b.starts_at):
        return True
    if _time_before(a.ends_at, b.ends_at):
        return True
    return a.fingerprint() < b.fingerprint()


def sort_alerts(alerts: list[Alert]) -> list[Alert]:
    """Sort alerts in place with ``alert_less`` by insertion; return the list."""
    for i, item in enumerate(alerts):
        j = i
        while j > 0 and alert_less(item, alerts[j - 1]):
            alerts[j] = alerts[j - 1]
            j -= 1
        alerts[j] = item
    return alerts