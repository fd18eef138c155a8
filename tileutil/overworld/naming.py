from __future__ import annotations

import itertools
from typing import Dict, List, Optional, Tuple, Union

from tileutil.core import config


class ConnectionKinds:
    """Interning table giving each connection name a stable integer id."""

    def __init__(self, first_id: int = config.FIRST_CONNECTION_KIND_ID) -> None:
        self._ids: Dict[str, int] = {}
        self._names: Dict[int, str] = {}
        self._next_id = itertools.count(first_id)

    def resolve(self, kind: Union[str, int]) -> int:
        if isinstance(kind, int):
            return kind
        existing = self._ids.get(kind)
        if existing is not None:
            return existing
        kind_id = next(self._next_id)
        self._ids[kind] = kind_id
        self._names[kind_id] = kind
        return kind_id

    def name_of(self, kind_id: int) -> Optional[str]:
        return self._names.get(kind_id)

    def items(self) -> List[Tuple[str, int]]:
        return list(self._ids.items())

    def __contains__(self, name: object) -> bool:
        return name in self._ids

    def __len__(self) -> int:
        return len(self._ids)
