"""Logging helper utilities for consistent summary reporting."""

from __future__ import annotations
from typing import Mapping

import click

# Colour per count label; unknown labels are left unstyled
_COLORS = {
    'imported': 'green',
    'exported': 'green',
    'failed': 'red',
    'skipped': 'yellow',
}


def format_summary(
    item_name: str,
    counts: Mapping[str, int],
    duration_seconds: float = 0.0,
) -> str:
    """Format a summary line with colored counts.

    Args:
        item_name: What was processed (e.g., "Import 'Road trip'")
        counts: Ordered label -> count pairs; zero counts other than the first are omitted
        duration_seconds: Total duration in seconds

    Returns:
        Formatted summary string with colors

    Example:
        >>> click.unstyle(format_summary("Import", {'imported': 3, 'failed': 1}))
        '✓ Import: 3 imported 1 failed'
    """
    parts = [click.style('✓', fg='green'), f"{item_name}:"]

    for idx, (label, count) in enumerate(counts.items()):
        if count == 0 and idx > 0:
            continue
        text = f'{count} {label}'
        color = _COLORS.get(label)
        parts.append(click.style(text, fg=color) if color else text)

    if duration_seconds > 0:
        parts.append(f"in {duration_seconds:.2f}s")

    return " ".join(parts)


__all__ = ["format_summary"]
