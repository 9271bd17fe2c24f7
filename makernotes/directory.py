# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Makernote directories

A Directory binds a TagValueStore to one vendor TagSchema and one
TagDescriptor. Vendor directories subclass it only to name their schema and
descriptor class:

    class KyoceraMakernoteDirectory(Directory):
        SCHEMA = KYOCERA_SCHEMA
        DESCRIPTOR_CLASS = KyoceraMakernoteDescriptor

The external reader fills the directory with ``set`` during a single decode
pass; afterwards the directory is only read.

Copyright 2025 DNAi inc.
"""

from typing import Any, List, Optional, Type

from makernotes.descriptor import TagDescriptor
from makernotes.exceptions import MakernoteError
from makernotes.rational import Rational
from makernotes.tag_schema import TagSchema
from makernotes.tag_values import TagValueStore
from makernotes.value_formatter import unknown_tag_name


class Tag:
    """
    View of one stored tag within a directory.

    Tags are created on demand by ``Directory.tags`` and read through to the
    directory, so they always reflect its current contents.
    """

    __slots__ = ('tag_id', '_directory')

    def __init__(self, tag_id: int, directory: 'Directory'):
        self.tag_id = tag_id
        self._directory = directory

    @property
    def tag_id_hex(self) -> str:
        """Tag id as zero-padded hex (e.g. ``0x000a``)."""
        return f"0x{self.tag_id:04x}"

    @property
    def tag_name(self) -> Optional[str]:
        return self._directory.get_tag_name(self.tag_id)

    def has_tag_name(self) -> bool:
        return self._directory.has_tag_name(self.tag_id)

    @property
    def description(self) -> Optional[str]:
        return self._directory.get_description(self.tag_id)

    @property
    def directory_name(self) -> str:
        return self._directory.name

    def __str__(self) -> str:
        description = self.description
        if description is None:
            description = f"{self._directory.get_string(self.tag_id)} (unable to formulate description)"
        name = self.tag_name or unknown_tag_name(self.tag_id)
        return f"[{self.directory_name}] {name} - {description}"

    def __repr__(self) -> str:
        return f"Tag({self.tag_id_hex}, {self.directory_name!r})"


class Directory:
    """
    Store of decoded tag values for one vendor schema.

    Subclasses provide ``SCHEMA`` and ``DESCRIPTOR_CLASS`` as class
    attributes. The base class can also be used directly with an explicit
    schema, in which case the generic TagDescriptor is attached.
    """

    SCHEMA: Optional[TagSchema] = None
    DESCRIPTOR_CLASS: Type[TagDescriptor] = TagDescriptor

    def __init__(self, schema: Optional[TagSchema] = None):
        """
        Args:
            schema: Tag schema; defaults to the class's SCHEMA

        Raises:
            MakernoteError: If no schema is available
        """
        schema = schema if schema is not None else self.SCHEMA
        if schema is None:
            raise MakernoteError(f"{type(self).__name__} has no tag schema")
        self._schema = schema
        self._values = TagValueStore()
        self._errors: List[str] = []
        self._descriptor: Optional[TagDescriptor] = None
        self.set_descriptor(self.DESCRIPTOR_CLASS(self))

    # ------------------------------------------------------------------
    # Schema and descriptor
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        """Display name of the directory, e.g. ``Apple Makernote``."""
        return self._schema.directory_name

    @property
    def schema(self) -> TagSchema:
        return self._schema

    @property
    def descriptor(self) -> Optional[TagDescriptor]:
        return self._descriptor

    def set_descriptor(self, descriptor: TagDescriptor) -> None:
        """
        Attach the descriptor used to interpret tag values.

        Raises:
            MakernoteError: If the descriptor is bound to another directory
        """
        if descriptor.directory is not self:
            raise MakernoteError("Descriptor is bound to a different directory")
        self._descriptor = descriptor

    def get_tag_name(self, tag_id: int) -> Optional[str]:
        """
        Return the schema's name for a tag id.

        Returns:
            Tag name, or None when the schema has no entry (whether or not a
            value is stored for the id)
        """
        return self._schema.name_of(tag_id)

    def has_tag_name(self, tag_id: int) -> bool:
        return self._schema.has_name(tag_id)

    def get_description(self, tag_id: int) -> Optional[str]:
        """Describe a tag's value using the attached descriptor."""
        if self._descriptor is None:
            return None
        return self._descriptor.get_description(tag_id)

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------

    def set(self, tag_id: int, value: Any) -> None:
        """
        Store a decoded value.

        Ids missing from the schema are stored too; only their name is
        unavailable.
        """
        self._values.set(tag_id, value)

    def get_object(self, tag_id: int) -> Optional[Any]:
        return self._values.get(tag_id)

    def contains_tag(self, tag_id: int) -> bool:
        return self._values.contains(tag_id)

    def get_int(self, tag_id: int) -> Optional[int]:
        return self._values.get_int(tag_id)

    def get_float(self, tag_id: int) -> Optional[float]:
        return self._values.get_float(tag_id)

    def get_bool(self, tag_id: int) -> Optional[bool]:
        return self._values.get_bool(tag_id)

    def get_rational(self, tag_id: int) -> Optional[Rational]:
        return self._values.get_rational(tag_id)

    def get_rational_array(self, tag_id: int) -> Optional[List[Rational]]:
        return self._values.get_rational_array(tag_id)

    def get_int_array(self, tag_id: int) -> Optional[List[int]]:
        return self._values.get_int_array(tag_id)

    def get_byte_array(self, tag_id: int) -> Optional[bytes]:
        return self._values.get_byte_array(tag_id)

    def get_string_array(self, tag_id: int) -> Optional[List[str]]:
        return self._values.get_string_array(tag_id)

    def get_string(self, tag_id: int) -> Optional[str]:
        return self._values.get_string(tag_id)

    def get_text(self, tag_id: int, encoding: Optional[str] = None) -> Optional[str]:
        return self._values.get_text(tag_id, encoding)

    def require_int(self, tag_id: int) -> int:
        return self._values.require_int(tag_id)

    def require_float(self, tag_id: int) -> float:
        return self._values.require_float(tag_id)

    def tag_ids(self) -> List[int]:
        """Stored tag ids in insertion order."""
        return self._values.tag_ids()

    @property
    def tag_count(self) -> int:
        return len(self._values)

    @property
    def tags(self) -> List[Tag]:
        """Stored tags in insertion order."""
        return [Tag(tag_id, self) for tag_id in self._values]

    @property
    def is_empty(self) -> bool:
        """True when the directory holds neither tags nor errors."""
        return not self._errors and len(self._values) == 0

    # ------------------------------------------------------------------
    # Errors
    # ------------------------------------------------------------------

    def add_error(self, message: str) -> None:
        """Record a problem found while populating this directory."""
        self._errors.append(message)

    @property
    def errors(self) -> List[str]:
        return list(self._errors)

    def has_errors(self) -> bool:
        return bool(self._errors)

    @property
    def error_count(self) -> int:
        return len(self._errors)

    def __str__(self) -> str:
        count = len(self._values)
        return f"{self.name} Directory ({count} {'tag' if count == 1 else 'tags'})"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} tags={len(self._values)}>"
