"""
Rich console output for netint
"""

from typing import Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich import box
from rich.markup import escape

from ..models import Overview, Sample
from ..regions import REGISTRY
from .. import __version__


# Styling thresholds
RTT_WARN_MS = 100
RTT_BAD_MS = 200
JITTER_WARN_MS = 10


class ConsoleOutput:
    """
    Rich console output for overviews.

    One table per origin region, one row per destination.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def print_header(self, regions: list[str]):
        """Print run header"""
        content = Text()
        content.append("netint", style="bold cyan")
        content.append(f" v{__version__}\n", style="dim")
        content.append("Origins: ", style="dim")
        content.append(", ".join(regions), style="bold")

        self.console.print(Panel(content, border_style="cyan", padding=(0, 1)))
        self.console.print()

    def print_regions(self):
        """Print the region registry"""
        table = Table(
            show_header=True,
            header_style="bold magenta",
            box=box.ROUNDED,
            border_style="dim"
        )
        table.add_column("Region")
        table.add_column("Code", style="cyan")
        table.add_column("Endpoint", style="dim")

        for region in REGISTRY:
            table.add_row(region.name, region.abbreviation, region.url)

        self.console.print(table)

    def print_overview(self, overview: Overview):
        """Print one origin's samples as a table"""
        table = Table(
            show_header=True,
            header_style="bold magenta",
            box=box.ROUNDED,
            border_style="dim",
            padding=(0, 1)
        )

        table.add_column("Destination", width=12)
        table.add_column("RTT (ms)", width=9, justify="right")
        table.add_column("Loss (%)", width=9, justify="right")
        table.add_column("Jitter (ms)", width=11, justify="right")
        table.add_column("Sampled (UTC)", width=20, style="dim")

        for name, sample in overview.samples.items():
            dest = Text(name, style="bold" if name == overview.name else "")
            table.add_row(
                dest,
                self._format_rtt(sample),
                self._format_loss(sample),
                self._format_jitter(sample),
                self._format_timestamp(sample)
            )

        title = Text()
        title.append("From ", style="dim")
        title.append(overview.name, style="bold")

        self.console.print(Panel(table, title=title, border_style="blue", padding=(0, 0)))

    def print_error(self, message: str):
        """Print error message"""
        self.console.print(f"[bold red]Error:[/] {escape(message)}")

    def _format_rtt(self, sample: Sample) -> Text:
        if sample.rtt >= RTT_BAD_MS:
            style = "red"
        elif sample.rtt >= RTT_WARN_MS:
            style = "yellow"
        else:
            style = "green"
        return Text(str(sample.rtt), style=style)

    def _format_loss(self, sample: Sample) -> Text:
        return Text(str(sample.loss), style="red" if sample.loss else "dim")

    def _format_jitter(self, sample: Sample) -> Text:
        return Text(str(sample.jitter), style="yellow" if sample.jitter >= JITTER_WARN_MS else "")

    def _format_timestamp(self, sample: Sample) -> str:
        ts = sample.timestamp
        return ts.strftime("%Y-%m-%d %H:%M:%S") if ts else "-"
