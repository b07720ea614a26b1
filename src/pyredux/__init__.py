"""pyredux - predictable synchronous state container."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyredux")
except PackageNotFoundError:
    __version__ = "0+local"
from pyredux._constants import ActionTypes
from pyredux._plain import is_plain_object
from pyredux.compose import compose
from pyredux.config import LoggerConfig
from pyredux.exceptions import (
    IllegalStateAccessError,
    InvalidActionError,
    InvalidArgumentError,
    PrematureDispatchError,
    ReduxError,
)
from pyredux.logger import create_logger
from pyredux.middleware import MiddlewareAPI, apply_middleware
from pyredux.models import ActionLogEntry
from pyredux.observable import StateObservable, Subscription
from pyredux.store import Store, create_store
from pyredux.thunk import create_thunk_middleware, thunk

__all__ = [
    "__version__",
    "ActionLogEntry",
    "ActionTypes",
    "IllegalStateAccessError",
    "InvalidActionError",
    "InvalidArgumentError",
    "LoggerConfig",
    "MiddlewareAPI",
    "PrematureDispatchError",
    "ReduxError",
    "StateObservable",
    "Store",
    "Subscription",
    "apply_middleware",
    "compose",
    "create_logger",
    "create_store",
    "create_thunk_middleware",
    "is_plain_object",
    "thunk",
]
