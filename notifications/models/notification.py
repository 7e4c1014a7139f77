from dataclasses import dataclass
from enum import Enum


class EventKind(str, Enum):
    ADMISSION = "admission"
    BILLING = "billing"


@dataclass(frozen=True)
class Notification:
    kind: EventKind
    message: str
