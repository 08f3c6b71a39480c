"""
JSON export for netint
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from ..models import Overview, Sample
from .. import __version__


class JsonExporter:
    """
    Export overviews to JSON.

    Samples keep their normalized integer fields; each also carries
    an ISO-8601 timestamp for readability (null when the epoch is
    outside the range datetime can represent).
    """

    def __init__(self):
        self.sources = []

    def add_source(self, url: str):
        """Record an endpoint that was queried"""
        if url not in self.sources:
            self.sources.append(url)

    def export(self, overviews: dict[str, Overview],
               output_path: Optional[Path] = None) -> dict:
        """
        Export overviews to JSON.

        Args:
            overviews: Origin name -> Overview
            output_path: Optional file path to write

        Returns:
            JSON-serializable dict
        """
        data = {
            "meta": {
                "version": __version__,
                "generator": "netint",
                "sources": self.sources,
                "generated_at": datetime.now(timezone.utc).isoformat()
            },
            "overviews": {
                name: self._serialize_overview(overview)
                for name, overview in overviews.items()
            }
        }

        if output_path:
            self._write_file(data, output_path)

        return data

    def _serialize_overview(self, overview: Overview) -> dict:
        return {
            "name": overview.name,
            "samples": {
                dest: {
                    **sample.to_dict(),
                    "timestamp": self._format_timestamp(sample)
                }
                for dest, sample in overview.samples.items()
            }
        }

    def _format_timestamp(self, sample: Sample) -> Optional[str]:
        ts = sample.timestamp
        return ts.isoformat() if ts else None

    def _write_file(self, data: dict, path: Path):
        """Write JSON to file"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)


def export_json(overviews: dict[str, Overview],
                output_path: Optional[Path] = None) -> dict:
    """Convenience function for JSON export"""
    exporter = JsonExporter()
    return exporter.export(overviews, output_path)
