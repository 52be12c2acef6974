from typing import List, Optional

from fastapi import Query

sources_query = Query(
    default=None,
    description="Restrict to these device labels; repeat the parameter for several.",
)


def selected_sources(values: Optional[List[str]]) -> Optional[frozenset[str]]:
    return frozenset(values) if values else None
