"""Report output for TextScan.

Reports come in three kinds (basic statistics, full statistics and word
frequency only) and render to CSV, TXT, JSON or XML. Renderers receive a
fully built ``Report``; they only format, they never compute statistics.
"""

from __future__ import annotations

import csv
import io
import re
import unicodedata
import xml.etree.ElementTree as ET
from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from enum import StrEnum
from pathlib import Path
from typing import Final

from pydantic import BaseModel, Field, model_validator

from textscan.analyzer.models import TextStats, WordCount
from textscan.exceptions import ReportWriteError
from textscan.logging import get_logger

logger = get_logger("output.report")

TXT_WORD_WIDTH: Final[int] = 20


class ReportFormat(StrEnum):
    """Report serialization formats."""

    CSV = "csv"
    TXT = "txt"
    JSON = "json"
    XML = "xml"


class ReportKind(StrEnum):
    """Report content kinds."""

    BASIC_STATS = "basic_stats"
    FULL_STATS = "full_stats"
    WORD_FREQUENCY = "word_frequency"


class Report(BaseModel, frozen=True):
    """A fully computed report ready for rendering.

    Attributes:
        kind: What the report contains.
        generated_at: Timestamp of generation.
        source: Name of the analyzed file, if any.
        stats: Text statistics (basic and full reports).
        frequency: Sorted word counts (full and frequency reports).
    """

    kind: ReportKind = Field(..., description="Report content kind")
    generated_at: datetime = Field(..., description="Timestamp of generation")
    source: str | None = Field(default=None, description="Analyzed file name")
    stats: TextStats | None = Field(default=None, description="Text statistics")
    frequency: tuple[WordCount, ...] = Field(
        default_factory=tuple, description="Word counts in display order"
    )

    @model_validator(mode="after")
    def check_contents(self) -> Report:
        """Ensure the contents match the report kind."""
        if self.kind != ReportKind.WORD_FREQUENCY and self.stats is None:
            raise ValueError(f"{self.kind} report requires stats")
        if self.kind == ReportKind.BASIC_STATS and self.frequency:
            raise ValueError("basic_stats report must not carry a frequency list")
        return self


def build_report(
    stats: TextStats | None = None,
    frequency: Sequence[WordCount] | None = None,
    source: str | None = None,
) -> Report:
    """Build a report, choosing its kind from the supplied contents.

    Args:
        stats: Text statistics, or None for a frequency-only report.
        frequency: Sorted word counts, or None for a basic report.
        source: Name of the analyzed file.

    Returns:
        Report ready for rendering.

    Raises:
        ValueError: If neither stats nor frequency is given.
    """
    if stats is None and frequency is None:
        raise ValueError("A report needs stats, frequency or both")

    if stats is not None and frequency is not None:
        kind = ReportKind.FULL_STATS
    elif stats is not None:
        kind = ReportKind.BASIC_STATS
    else:
        kind = ReportKind.WORD_FREQUENCY

    return Report(
        kind=kind,
        generated_at=datetime.now(UTC),
        source=source,
        stats=stats,
        frequency=tuple(frequency or ()),
    )


def _stats_rows(stats: TextStats) -> list[tuple[str, int]]:
    return [
        ("words", stats.words),
        ("chars_with_spaces", stats.chars_with_spaces),
        ("chars_without_spaces", stats.chars_without_spaces),
        ("sentences", stats.sentences),
    ]


def render_csv(report: Report) -> str:
    """Render a report as CSV.

    Statistics come as a ``metric,value`` table; the frequency list as a
    ``word,count`` table, separated by an empty line in full reports.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")

    if report.stats is not None:
        writer.writerow(["metric", "value"])
        writer.writerows(_stats_rows(report.stats))

    if report.kind != ReportKind.BASIC_STATS:
        if report.stats is not None:
            writer.writerow([])
        writer.writerow(["word", "count"])
        for item in report.frequency:
            writer.writerow([item.word, item.count])

    return buffer.getvalue()


def render_txt(report: Report) -> str:
    """Render a report as plain text."""
    lines: list[str] = []

    if report.stats is not None:
        stats = report.stats
        lines += [
            "=== Basic statistics ===",
            f"Words: {stats.words}",
            f"Characters (with spaces): {stats.chars_with_spaces}",
            f"Characters (without spaces): {stats.chars_without_spaces}",
            f"Sentences: {stats.sentences}",
        ]

    if report.kind != ReportKind.BASIC_STATS:
        if lines:
            lines.append("")
        lines.append("=== Word frequency ===")
        lines += [f"{item.word:<{TXT_WORD_WIDTH}} : {item.count}" for item in report.frequency]

    return "\n".join(lines) + "\n"


def render_json(report: Report, indent: int = 2) -> str:
    """Render a report as JSON."""
    exclude = {"frequency"} if report.kind == ReportKind.BASIC_STATS else None
    return report.model_dump_json(indent=indent, exclude_none=True, exclude=exclude) + "\n"


def render_xml(report: Report) -> str:
    """Render a report as XML."""
    root = ET.Element(
        "report",
        {"type": str(report.kind), "generatedAt": report.generated_at.isoformat()},
    )
    if report.source is not None:
        root.set("source", report.source)

    if report.stats is not None:
        stats_element = ET.SubElement(root, "stats")
        for name, value in _stats_rows(report.stats):
            ET.SubElement(stats_element, name).text = str(value)

    if report.kind != ReportKind.BASIC_STATS:
        frequency_element = ET.SubElement(root, "frequency")
        for item in report.frequency:
            ET.SubElement(frequency_element, "item", {"word": item.word, "count": str(item.count)})

    ET.indent(root)
    body = ET.tostring(root, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}\n'


RENDERERS: Final[dict[ReportFormat, Callable[[Report], str]]] = {
    ReportFormat.CSV: render_csv,
    ReportFormat.TXT: render_txt,
    ReportFormat.JSON: render_json,
    ReportFormat.XML: render_xml,
}


def render_report(report: Report, fmt: ReportFormat) -> str:
    """Render a report in the requested format.

    Args:
        report: Report to render.
        fmt: Output format.

    Returns:
        The formatted report text.
    """
    return RENDERERS[ReportFormat(fmt)](report)


def write_report(content: str, path: Path) -> Path:
    """Write rendered report text to a file, creating parent directories.

    Args:
        content: Rendered report.
        path: Destination file.

    Returns:
        The path written to.

    Raises:
        ReportWriteError: If the directory or file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ReportWriteError(f"Cannot write report: {e.strerror or e}", path=path) from e

    logger.info("Wrote %d characters to %s", len(content), path)
    return path


def slugify(text: str) -> str:
    """Convert text to a filesystem-safe slug.

    Args:
        text: Input text to slugify.

    Returns:
        Lowercase ASCII slug with hyphens.
    """
    # Polish ł has no NFKD decomposition
    text = text.replace("ł", "l").replace("Ł", "L")
    text = unicodedata.normalize("NFKD", text)
    text = text.encode("ascii", "ignore").decode("ascii")
    text = text.lower()
    text = re.sub(r"[\s_]+", "-", text)
    text = re.sub(r"[^a-z0-9-]", "", text)
    text = re.sub(r"-+", "-", text)
    return text.strip("-")


def default_report_path(
    source: Path,
    kind: ReportKind,
    fmt: ReportFormat,
    output_dir: Path,
) -> Path:
    """Build the default destination for a report.

    Args:
        source: The analyzed file.
        kind: Report kind.
        fmt: Report format, used as the file extension.
        output_dir: Directory for reports.

    Returns:
        Path in format: {output_dir}/{source-slug}_{kind}.{fmt}
    """
    slug = slugify(source.stem) or "report"
    return output_dir / f"{slug}_{kind}.{fmt}"
