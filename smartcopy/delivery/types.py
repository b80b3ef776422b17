"""Types shared by the delivery dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Optional

if TYPE_CHECKING:
    from .host import HostServices


# Anything the host hands us: a tool window, a project root, a widget.
DeliveryTarget = Any


class EngineVariant(Enum):
    CLASSIC = "classic"
    MODERN_BLOCK = "modern_block"
    UNKNOWN = "unknown"


class Outcome(Enum):
    DELIVERED = "delivered"
    NOT_APPLICABLE = "not_applicable"


@dataclass(frozen=True)
class CapabilityProbe:
    """Result of looking up and invoking one named member on an opaque object.

    ``applicable`` is True only when a matching member was found and the call
    returned without raising. ``error`` holds the exception a matched member
    raised, so callers can tell "absent" from "present but failing".
    """

    name: str
    arity: int
    applicable: bool = False
    value: Any = None
    member: Optional[str] = None
    error: Optional[BaseException] = None

    def __bool__(self) -> bool:
        return self.applicable


@dataclass(frozen=True)
class SendResult:
    ok: bool
    message: str
    strategy: Optional[str] = None

    @classmethod
    def success(cls, message: str, strategy: Optional[str] = None) -> "SendResult":
        return cls(True, message, strategy)

    @classmethod
    def error(cls, message: str) -> "SendResult":
        return cls(False, message)


@dataclass
class DeliveryContext:
    """Everything a strategy needs for one delivery attempt.

    Built once per ``deliver`` call and discarded afterwards.
    """

    root: DeliveryTarget
    surface: DeliveryTarget
    content: DeliveryTarget
    component: DeliveryTarget
    payload: str
    host: "HostServices"
    variant: EngineVariant = EngineVariant.UNKNOWN


Strategy = Callable[[DeliveryContext], Outcome]
