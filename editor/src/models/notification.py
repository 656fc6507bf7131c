"""Status notification payload."""
from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    ERROR = 'error'
    SUCCESS = 'success'


@dataclass(frozen=True)
class Notification:
    message: str
    severity: Severity
