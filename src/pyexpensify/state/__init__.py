"""State container layer.

Actions, the reducer composer and the store.  The store is the single
owner of application state; reducers compute every new state.
"""

from pyexpensify.state.actions import INIT, Action, action_tag, action_types_by_tag, ensure_action
from pyexpensify.state.combine import Reducer, combine_reducers
from pyexpensify.state.store import Store, Subscriber, create_store

__all__ = [
    "INIT",
    "Action",
    "Reducer",
    "Store",
    "Subscriber",
    "action_tag",
    "action_types_by_tag",
    "combine_reducers",
    "create_store",
    "ensure_action",
]
