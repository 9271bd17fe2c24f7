# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Per-vendor tag name tables.

Each vendor module builds one TagSchema at import time and every directory
of that vendor shares it. Tag id spaces are per vendor: two schemas may give
the same id different names.
"""

from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional


class TagSchema:
    """
    Read-only mapping from tag id to display name, plus the directory name.
    """

    __slots__ = ('_directory_name', '_tag_names')

    def __init__(self, directory_name: str, tag_names: Mapping[int, str]):
        """
        Args:
            directory_name: Display name of directories using this schema
                (e.g. "Apple Makernote")
            tag_names: Tag id to display name; copied, later changes to the
                argument are not seen
        """
        self._directory_name = directory_name
        self._tag_names = MappingProxyType(dict(tag_names))

    @property
    def directory_name(self) -> str:
        return self._directory_name

    @property
    def tag_names(self) -> Mapping[int, str]:
        return self._tag_names

    def name_of(self, tag_id: int) -> Optional[str]:
        """Return the tag's display name, or None if the schema lacks it."""
        return self._tag_names.get(tag_id)

    def has_name(self, tag_id: int) -> bool:
        return tag_id in self._tag_names

    def tag_ids(self) -> List[int]:
        """All named tag ids, ascending."""
        return sorted(self._tag_names)

    def __contains__(self, tag_id: int) -> bool:
        return tag_id in self._tag_names

    def __iter__(self) -> Iterator[int]:
        return iter(self.tag_ids())

    def __len__(self) -> int:
        return len(self._tag_names)

    def __repr__(self) -> str:
        return f"TagSchema({self._directory_name!r}, {len(self._tag_names)} tags)"
