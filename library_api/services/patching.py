"""
Partial Update Merge

Update requests only carry the fields a client wants to change. merge_patch
combines those with the stored values and returns the full set of column
values to write, without touching the loaded ORM object.
"""

from typing import Any, Iterable

from pydantic import BaseModel


def merge_patch(record: Any, patch: BaseModel, fields: Iterable[str]) -> dict[str, Any]:
    """
    Merge a patch schema onto the current values of a persisted record.

    Only fields the client actually sent (model_dump(exclude_unset=True))
    override the record; everything else keeps its stored value. Keys of
    the patch that are not in ``fields`` are ignored.

    Args:
        record: Loaded ORM instance
        patch: Pydantic update schema
        fields: Column attribute names that may change

    Returns:
        New dict of column name -> value
    """
    fields = tuple(fields)
    merged = {name: getattr(record, name) for name in fields}
    for name, value in patch.model_dump(exclude_unset=True).items():
        if name in merged:
            merged[name] = value
    return merged
