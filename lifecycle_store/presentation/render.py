"""Rich rendering of store contents for the console."""

from typing import Dict, Iterable, Optional

from rich.console import Console
from rich.table import Table

from ..models.base import OperationResult
from ..models.record import Record
from ..utils.date_utils import format_timestamp

STAMP_TITLES: Dict[str, str] = {
    "completed_at": "Completed at",
    "cancelled_at": "Cancelled at",
    "loaned_at": "Loaned at",
    "returned_at": "Returned at",
}


class RecordRenderer:
    """Formats records of one domain as rich tables and status lines."""

    def __init__(
        self,
        console: Console,
        label_title: str = "Label",
        metadata_titles: Optional[Dict[str, str]] = None,
        timestamp_format: str = "%d/%m/%Y %H:%M:%S",
    ) -> None:
        self.console = console
        self.label_title = label_title
        self.metadata_titles = metadata_titles or {}
        self.timestamp_format = timestamp_format

    def _value(self, value) -> str:
        if hasattr(value, "strftime"):
            return format_timestamp(value, self.timestamp_format)
        return str(value)

    def details(self, record: Record) -> Dict[str, str]:
        """Field title -> rendered value, skipping optional fields that are absent."""
        rows = {
            "ID": str(record.id),
            self.label_title: record.label,
            "Status": record.status,
        }
        for key, title in self.metadata_titles.items():
            value = record.meta(key)
            if value is not None:
                rows[title] = self._value(value)
        for name, value in record.timestamps.items():
            rows[STAMP_TITLES.get(name, name)] = self._value(value)
        return rows

    def table(self, records: Iterable[Record], title: str, empty_message: str) -> None:
        """Print records as one table, or ``empty_message`` if there are none."""
        records = list(records)
        if not records:
            self.console.print(f"[bold]{title}[/bold]")
            self.console.print(f"  [dim]{empty_message}[/dim]")
            return

        rendered = [self.details(record) for record in records]
        columns = []
        for row in rendered:
            for column in row:
                if column not in columns:
                    columns.append(column)

        table = Table(title=title, title_justify="left", show_lines=False)
        for column in columns:
            table.add_column(column)
        for row in rendered:
            table.add_row(*(row.get(column, "") for column in columns))
        self.console.print(table)

    def outcome(self, result: OperationResult[Record], success_message: str) -> None:
        """Report the outcome of a store operation."""
        if result.success:
            self.console.print(f"[green]> {success_message}[/green]")
        elif result.error_code == "RECORD_NOT_FOUND":
            self.console.print(f"[red]Error: {result.message}[/red]")
        else:
            self.console.print(f"[yellow]Warning: {result.message}[/yellow]")
