"""
Report Generator - Format search results for human consumption.

Produces console output and CSV export for search results.
"""

import csv
import io
from datetime import datetime
from typing import Optional, TextIO

from .loader import shirt_to_dict
from .models import Color, SearchOptions, SearchResults, Size
from .search import summarize_results

# Column order for exported shirts; load_catalog reads the same columns back
CSV_FIELDS = ["id", "name", "color", "size"]


def _describe_filter(options: Optional[SearchOptions]) -> str:
    if options is None:
        return "(none)"
    colors = ", ".join(c.value for c in options.colors) or "any"
    sizes = ", ".join(s.value for s in options.sizes) or "any"
    return f"colors: {colors} | sizes: {sizes}"


def format_console(
    results: SearchResults,
    options: Optional[SearchOptions] = None,
    show_items: bool = False,
) -> str:
    """
    Format results for console display.

    Facet counts are listed in Color/Size enumeration order, whatever
    order the result carries them in.

    Args:
        results: Search results to format
        options: The filter that produced them (shown in the header)
        show_items: Whether to list every matched shirt

    Returns:
        Formatted string for console output
    """
    summary = summarize_results(results)
    lines = []

    lines.append("=" * 50)
    lines.append(f"FILTER  {_describe_filter(options)}")
    lines.append(f"MATCHES {summary['total']}")
    lines.append("=" * 50)

    lines.append("\nCOLORS")
    lines.append("-" * 50)
    color_counts = results.color_count_map()
    for color in Color:
        if color in color_counts:
            lines.append(f"  {color.value:<10} {color_counts[color]:>8}")

    lines.append("\nSIZES")
    lines.append("-" * 50)
    size_counts = results.size_count_map()
    for size in Size:
        if size in size_counts:
            lines.append(f"  {size.value:<10} {size_counts[size]:>8}")

    if show_items:
        lines.append(f"\nSHIRTS ({summary['total']})")
        lines.append("-" * 50)
        if not results.shirts:
            lines.append("  No shirts matched.")
        for shirt in results.shirts:
            lines.append(f"  {str(shirt.id)[:8]}  {shirt.name:<20} {shirt.color.value:<8} {shirt.size.value}")

    return "\n".join(lines)


def export_csv(results: SearchResults, output: TextIO | None = None) -> str:
    """
    Export matched shirts to CSV format.

    Args:
        results: Search results to export
        output: Optional file handle to write to

    Returns:
        CSV string (also writes to output if provided)
    """
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=CSV_FIELDS)
    writer.writeheader()
    for shirt in results.shirts:
        writer.writerow(shirt_to_dict(shirt))

    csv_content = buffer.getvalue()
    if output:
        output.write(csv_content)
    return csv_content


def export_counts_csv(results: SearchResults, output: TextIO | None = None) -> str:
    """Export the facet breakdown as facet,value,count rows."""
    buffer = io.StringIO()
    writer = csv.writer(buffer)

    writer.writerow(["facet", "value", "count"])
    for c in results.color_counts:
        writer.writerow(["color", c.color.value, c.count])
    for s in results.size_counts:
        writer.writerow(["size", s.size.value, s.count])

    csv_content = buffer.getvalue()
    if output:
        output.write(csv_content)
    return csv_content


def generate_report_filename(prefix: str = "facet_search", extension: str = "csv") -> str:
    """
    Generate a filename for the report.

    Returns:
        Filename like "facet_search_2026-01-08.csv"
    """
    date_str = datetime.now().strftime("%Y-%m-%d")
    return f"{prefix}_{date_str}.{extension}"
