import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from . import __version__
from .client import Client
from .errors import NetintError
from .logging_config import configure_logging
from .output import ConsoleOutput, JsonExporter
from .regions import list_regions


console = Console()
logger = logging.getLogger(__name__)


@click.command()
@click.argument('regions', nargs=-1)
@click.option('-a', '--all', 'fetch_every', is_flag=True,
              help='Fetch every region (default when no REGION is given)')
@click.option('-l', '--list', 'list_only', is_flag=True,
              help='List known regions and exit')
@click.option('-w', '--timeout', default=Client.DEFAULT_TIMEOUT, type=float,
              help='HTTP timeout in seconds (default: 10)')
@click.option('--json', 'json_path', type=click.Path(),
              help='Export results to JSON file')
@click.option('--log-level', default=None,
              type=click.Choice(['debug', 'info', 'warning', 'error'], case_sensitive=False),
              help='Log level (default: $NETINT_LOG_LEVEL or warning)')
@click.version_option(version=__version__)
def main(regions: tuple[str, ...], fetch_every: bool, list_only: bool,
         timeout: float, json_path: Optional[str], log_level: Optional[str]):
    """
    netint - Linode network internals.

    Show RTT, loss and jitter from each REGION to every Linode data
    center. With no REGION, all regions are fetched.

    Examples:

        netint dallas

        netint london tokyo --json samples.json

        netint --list
    """
    configure_logging(log_level)
    output = ConsoleOutput()

    if list_only:
        output.print_regions()
        return

    names = list_regions() if fetch_every or not regions else list(regions)

    try:
        with Client(timeout=timeout) as client:
            output.print_header(names)

            if fetch_every or not regions:
                overviews = client.fetch_all()
            else:
                overviews = {}
                for name in names:
                    overviews[name] = client.fetch_overview(name)

            for overview in overviews.values():
                output.print_overview(overview)

            if json_path:
                exporter = JsonExporter()
                for name in overviews:
                    exporter.add_source(client.url_for(name))

                json_file = Path(json_path)
                exporter.export(overviews, json_file)
                console.print(f"\n[dim]Results exported to:[/] {json_file.absolute()}")

    except NetintError as e:
        logger.debug("Fetch failed", exc_info=True)
        output.print_error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/]")
        sys.exit(130)


if __name__ == '__main__':
    main()
