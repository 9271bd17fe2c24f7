# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Tag lister

Lists the registered vendors and the tags each vendor schema names.
Used by the ``-list`` command-line option.

Copyright 2025 DNAi inc.
"""

from typing import List, Tuple

from makernotes.registry import get_directory_class, registered_vendors


class TagLister:
    """
    Lists vendor schemas and their tags.
    """

    @staticmethod
    def list_vendors() -> List[str]:
        """
        Get all registered vendor ids.

        Returns:
            Sorted list of vendor ids
        """
        return registered_vendors()

    @staticmethod
    def list_tags(vendor: str) -> List[Tuple[int, str]]:
        """
        Get the tags named by one vendor schema.

        Args:
            vendor: Vendor id

        Returns:
            (tag id, tag name) pairs sorted by tag id

        Raises:
            UnknownVendorError: If the vendor is not registered
        """
        schema = get_directory_class(vendor).SCHEMA
        return [(tag_id, schema.name_of(tag_id)) for tag_id in schema.tag_ids()]

    @staticmethod
    def list_all_tags() -> List[str]:
        """
        Get every tag of every vendor as "Directory Name:Tag Name".
        """
        tags = []
        for vendor in registered_vendors():
            schema = get_directory_class(vendor).SCHEMA
            for tag_id in schema.tag_ids():
                tags.append(f"{schema.directory_name}:{schema.name_of(tag_id)}")
        return tags

    @staticmethod
    def list_described_tags(vendor: str) -> List[int]:
        """Tag ids the vendor's descriptor interprets specially."""
        return get_directory_class(vendor).DESCRIPTOR_CLASS.supported_tag_ids()
