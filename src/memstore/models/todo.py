"""Todo record returned by the JSONPlaceholder ``/todos`` endpoint."""

from __future__ import annotations

from memstore.models._base import WireModel


class Todo(WireModel):
    """A single todo item.

    Parameters
    ----------
    user_id : int
        Owner of the todo (``userId`` on the wire).
    id : int
        Todo identifier.
    title : str
        Free-form title.
    completed : bool
        Completion flag.
    """

    user_id: int
    id: int
    title: str
    completed: bool = False
