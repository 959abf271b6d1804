"""pyexpensify - a minimal unidirectional state container with an expense tracker example."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyexpensify")
except PackageNotFoundError:
    __version__ = "0+local"
from pyexpensify.config import ReentrantPolicy, StoreConfig
from pyexpensify.exceptions import (
    MalformedActionError,
    PyExpensifyConfigError,
    PyExpensifyError,
    ReducerError,
    ReentrantDispatchError,
)
from pyexpensify.models import Expense, Filters, SortBy
from pyexpensify.state import INIT, Action, Reducer, Store, Subscriber, combine_reducers, create_store

__all__ = [
    "__version__",
    "INIT",
    "Action",
    "Expense",
    "Filters",
    "MalformedActionError",
    "PyExpensifyConfigError",
    "PyExpensifyError",
    "Reducer",
    "ReducerError",
    "ReentrantDispatchError",
    "ReentrantPolicy",
    "SortBy",
    "Store",
    "StoreConfig",
    "Subscriber",
    "combine_reducers",
    "create_store",
]
