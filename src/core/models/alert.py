"""Yield alert model."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class AlertType(Enum):
    """Severity of an alert."""

    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"
    INFO = "info"


@dataclass(frozen=True)
class Alert:
    """A yield-optimization signal derived from a set of positions."""

    id: str
    type: AlertType
    title: str
    message: str
    timestamp: Optional[datetime] = None
