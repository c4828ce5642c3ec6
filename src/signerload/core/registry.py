from __future__ import annotations
import bisect
from collections import defaultdict
from typing import Dict, List, Type

from .parser_base import MetadataHandler
from .model import UnknownMetadataTypeError


class MetadataRegistry:
    def __init__(self) -> None:
        self._by_type: Dict[str, List[tuple[int, str, Type[MetadataHandler]]]] = defaultdict(list)

    # called from MetadataHandler.__init_subclass__
    def register(self, handler_cls: Type[MetadataHandler]) -> None:
        # (priority, class_name, handler_cls) keeps sorting stable
        entry = (handler_cls.priority, handler_cls.__name__, handler_cls)
        for type_name in handler_cls.types:
            bisect.insort(self._by_type[type_name.lower()], entry)

    def known_types(self) -> list[str]:
        return sorted(t for t, lst in self._by_type.items() if lst)

    def choose(self, type_name: str) -> Type[MetadataHandler]:
        lst = self._by_type.get(str(type_name).lower())
        if lst:
            return lst[0][2]             # first by priority
        raise UnknownMetadataTypeError(
            f"Unknown metadata type {type_name!r} (expected one of: {', '.join(self.known_types())})"
        )


# singleton used project-wide
_REGISTRY = MetadataRegistry()
