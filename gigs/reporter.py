"""
Report Generator for conformance runs.

Creates Excel workbooks (summary, results, configuration and factories sheets)
and Markdown summaries from the entries of a suite run.
"""

import io
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from .suite import Factories, ResultEntry, Status, summarize

RESULT_COLUMNS = ["Series", "Test", "Case", "Object", "Status", "Message", "Configuration key"]


def results_frame(entries: List[ResultEntry]) -> pd.DataFrame:
    """One row per case."""
    records = [{
        "Series": e.series,
        "Test": e.test_class,
        "Case": e.case,
        "Object": e.display_name,
        "Status": e.status.value,
        "Message": e.message,
        "Configuration key": e.key.value if e.key is not None else "",
    } for e in entries]
    return pd.DataFrame(records, columns=RESULT_COLUMNS)


def configuration_frame(entries: List[ResultEntry]) -> pd.DataFrame:
    """One row per case, one column per boolean configuration key."""
    records = []
    for e in entries:
        row: Dict[str, Any] = {"Test": e.test_class, "Case": e.case}
        row.update({k: v for k, v in e.configuration.items() if isinstance(v, bool)})
        records.append(row)
    return pd.DataFrame(records)


def factories_frame(factories: Factories) -> pd.DataFrame:
    records = [{
        "Role": role,
        "Supplied": factory is not None,
        "Implementation": type(factory).__qualname__ if factory is not None else "",
    } for role, factory in factories.as_dict().items()]
    return pd.DataFrame(records, columns=["Role", "Supplied", "Implementation"])


class ConformanceReporter:
    """
    Generates Excel conformance reports.

    Usage:
        reporter = ConformanceReporter(factories)
        reporter.add_entries(suite.run())
        reporter.save("reports/gigs.xlsx")
    """

    def __init__(self, factories: Optional[Factories] = None, output_path: Optional[str] = None):
        """
        Initialize the reporter.

        Args:
            factories: Factories the suite ran with, listed in the factories sheet
            output_path: Path to save the Excel file (optional, can set later)
        """
        self.factories = factories or Factories()
        self.output_path = Path(output_path) if output_path else None
        self.entries: List[ResultEntry] = []

    def add_entries(self, entries: List[ResultEntry]):
        self.entries.extend(entries)

    def generate(self, output_path: Optional[str] = None) -> bytes:
        """
        Generate the Excel workbook.

        Args:
            output_path: Optional path to save file (overrides constructor path)

        Returns:
            Excel file as bytes
        """
        if output_path:
            self.output_path = Path(output_path)

        output = io.BytesIO()
        with pd.ExcelWriter(output, engine="xlsxwriter") as writer:
            formats = self._create_formats(writer.book)
            self._write_summary_sheet(writer, formats)
            self._write_frame(writer, formats, "Results", results_frame(self.entries), status_column=4)
            self._write_frame(writer, formats, "Configuration", configuration_frame(self.entries))
            self._write_frame(writer, formats, "Factories", factories_frame(self.factories))

        if self.output_path:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.output_path, 'wb') as f:
                f.write(output.getvalue())

        return output.getvalue()

    def save(self, output_path: str):
        """
        Generate and save the Excel report.

        Args:
            output_path: Path to save the file
        """
        self.generate(output_path)

    def _create_formats(self, workbook) -> Dict[str, Any]:
        """Create all cell formats for the workbook."""
        return {
            "header_main": workbook.add_format({
                'bold': True, 'font_size': 14, 'bg_color': '#1F4E79',
                'font_color': 'white', 'border': 1, 'align': 'center', 'valign': 'vcenter'
            }),
            "header": workbook.add_format({
                'bold': True, 'bg_color': '#D9E1F2', 'border': 1,
                'align': 'center', 'valign': 'vcenter', 'text_wrap': True
            }),
            Status.PASSED: workbook.add_format({
                'bold': True, 'bg_color': '#C6EFCE', 'font_color': '#006100',
                'border': 1, 'align': 'center'
            }),
            Status.FAILED: workbook.add_format({
                'bold': True, 'bg_color': '#FFC7CE', 'font_color': '#9C0006',
                'border': 1, 'align': 'center'
            }),
            Status.SKIPPED: workbook.add_format({
                'bg_color': '#FFEB9C', 'font_color': '#9C5700',
                'border': 1, 'align': 'center'
            }),
            "text": workbook.add_format({'border': 1, 'align': 'left'}),
            "text_center": workbook.add_format({'border': 1, 'align': 'center'}),
        }

    def _write_summary_sheet(self, writer, formats: Dict):
        """Write the summary sheet with counts per series."""
        ws = writer.book.add_worksheet("Summary")

        ws.merge_range(0, 0, 0, 4, "GIGS Conformance Report", formats["header_main"])
        ws.write(1, 0, f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
        counts = summarize(self.entries)
        ws.write(2, 0, f"Total Cases: {len(self.entries)} "
                       f"({counts['passed']} passed, {counts['failed']} failed, {counts['skipped']} skipped)")

        headers = ["Series", "Test", "Passed", "Failed", "Skipped"]
        row = 4
        for col, header in enumerate(headers):
            ws.write(row, col, header, formats["header"])

        by_test: Dict[str, List[ResultEntry]] = {}
        for entry in self.entries:
            by_test.setdefault(entry.test_class, []).append(entry)

        for test_class, entries in by_test.items():
            row += 1
            test_counts = summarize(entries)
            ws.write(row, 0, entries[0].series, formats["text_center"])
            ws.write(row, 1, test_class, formats["text"])
            for col, status in enumerate(Status, start=2):
                count = test_counts[status.value]
                ws.write(row, col, count, formats[status] if count else formats["text_center"])

        ws.set_column(0, 0, 10)
        ws.set_column(1, 1, 28)
        ws.set_column(2, 4, 10)

    def _write_frame(self, writer, formats: Dict, sheet_name: str, frame: pd.DataFrame,
                     status_column: Optional[int] = None):
        """Write a table with styled headers, coloring the status cells if any."""
        frame.to_excel(writer, sheet_name=sheet_name, index=False)
        ws = writer.sheets[sheet_name]
        for col, header in enumerate(frame.columns):
            ws.write(0, col, header, formats["header"])
            width = max([len(str(header))] + [len(str(v)) for v in frame[header]])
            ws.set_column(col, col, min(max(width + 2, 10), 80))
        if status_column is not None:
            for row, value in enumerate(frame.iloc[:, status_column], start=1):
                ws.write(row, status_column, value, formats[Status(value)])


def generate_markdown_summary(entries: List[ResultEntry]) -> str:
    """
    Generate a Markdown summary of a suite run.

    Args:
        entries: Entries returned by ``TestSuite.run()``

    Returns:
        Markdown formatted string
    """
    lines = [
        "# GIGS Conformance Summary",
        "",
        f"**Generated:** {datetime.now().strftime('%Y-%m-%d %H:%M')}",
        f"**Total Cases:** {len(entries)}",
        "",
        "## Results",
        "",
        "| Series | Test | Object | Status | Message |",
        "|--------|------|--------|--------|---------|",
    ]

    icons = {Status.PASSED: "✅ PASS", Status.FAILED: "❌ FAIL", Status.SKIPPED: "⏭️ SKIP"}
    for e in entries:
        message = e.message.replace("|", "\\|").replace("\n", " ")
        lines.append(f"| {e.series} | {e.test_class} | {e.display_name} | {icons[e.status]} | {message} |")

    counts = summarize(entries)
    lines.extend([
        "",
        f"**Overall:** {counts['passed']}/{len(entries)} passed, {counts['skipped']} skipped",
    ])

    return "\n".join(lines)


__all__ = [
    "results_frame",
    "configuration_frame",
    "factories_frame",
    "ConformanceReporter",
    "generate_markdown_summary",
]
