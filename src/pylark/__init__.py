"""pylark — query-building client for Skylark-style sparse fieldset APIs."""

from pylark._config import ClientConfig
from pylark._filters import Constraint, Filter
from pylark.exceptions import (
    PylarkConnectionError,
    PylarkError,
    PylarkHTTPError,
    PylarkTimeoutError,
    PylarkURLError,
    PylarkValidationError,
)
from pylark.field import Field
from pylark.request import Order, Request

__all__ = [
    "ClientConfig",
    "Constraint",
    "Field",
    "Filter",
    "Order",
    "PylarkConnectionError",
    "PylarkError",
    "PylarkHTTPError",
    "PylarkTimeoutError",
    "PylarkURLError",
    "PylarkValidationError",
    "Request",
]

__version__ = "0.1.0"
