# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Directory reports

Renders the tags stored in a Directory as report records and formats them
as text, JSON or CSV. Tags absent from the vendor schema are shown as
``Unknown tag (0xHHHH)``; tags whose value cannot be described are shown
from their raw value, so one bad tag never aborts a report.

Copyright 2025 DNAi inc.
"""

import json
import logging
from dataclasses import asdict, dataclass
from typing import Iterable, List

from makernotes.directory import Directory
from makernotes.value_formatter import unknown_tag_name

logger = logging.getLogger(__name__)

UNDESCRIBED_SUFFIX = "(unable to formulate description)"

__all__ = ['TagReport', 'describe_directory', 'format_report', 'unknown_tag_name']


@dataclass
class TagReport:
    """One reported tag."""
    directory_name: str
    tag_id: int
    tag_id_hex: str
    tag_name: str
    description: str
    description_available: bool = True


def describe_directory(directory: Directory) -> List[TagReport]:
    """
    Build report records for every stored tag, in insertion order.

    Args:
        directory: Directory to report on

    Returns:
        List of TagReport records
    """
    reports = []
    for tag in directory.tags:
        description = tag.description
        available = description is not None
        if not available:
            logger.debug("%s: no description for tag %s", directory.name, tag.tag_id_hex)
            description = f"{directory.get_string(tag.tag_id)} {UNDESCRIBED_SUFFIX}"
        reports.append(TagReport(
            directory_name=directory.name,
            tag_id=tag.tag_id,
            tag_id_hex=tag.tag_id_hex,
            tag_name=tag.tag_name or unknown_tag_name(tag.tag_id),
            description=description,
            description_available=available,
        ))
    return reports


def _csv_field(value) -> str:
    # Escape quotes by doubling them
    return '"' + str(value).replace('"', '""') + '"'


def format_report(reports: Iterable[TagReport], format_type: str = "text",
                  show_ids: bool = False) -> str:
    """
    Format report records.

    Args:
        reports: Records from ``describe_directory``
        format_type: Output format ('text', 'json', 'csv')
        show_ids: Include hexadecimal tag ids in text output

    Returns:
        Formatted output string
    """
    reports = list(reports)
    if format_type == "json":
        return json.dumps([asdict(report) for report in reports], indent=2, ensure_ascii=False)
    elif format_type == "csv":
        lines = ["Directory,Tag ID,Tag,Description"]
        for report in reports:
            lines.append(','.join(_csv_field(v) for v in (
                report.directory_name, report.tag_id_hex, report.tag_name, report.description,
            )))
        return "\n".join(lines)
    else:  # text format (default)
        lines = []
        for report in reports:
            prefix = f"{report.tag_id_hex} " if show_ids else ""
            lines.append(f"{prefix}[{report.directory_name}] {report.tag_name}: {report.description}")
        return "\n".join(lines)
