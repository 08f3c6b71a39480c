"""
netint - Linode network internals client

Fetches ping samples (RTT, loss, jitter) between Linode data centers
and normalizes them into typed overviews, one per origin region.
"""

__version__ = "0.1.0"

from .errors import (
    NetintError,
    UnknownRegion,
    TransportFailure,
    MalformedResponse,
    MalformedMeasurement,
)
from .models import Sample, Overview
from .regions import Region, list_regions, abbreviation, get_region
from .client import (
    Client,
    fetch_overview,
    fetch_all,
    dallas,
    fremont,
    atlanta,
    newark,
    london,
    tokyo,
)

__all__ = [
    'NetintError', 'UnknownRegion', 'TransportFailure',
    'MalformedResponse', 'MalformedMeasurement',
    'Sample', 'Overview', 'Region',
    'list_regions', 'abbreviation', 'get_region',
    'Client', 'fetch_overview', 'fetch_all',
    'dallas', 'fremont', 'atlanta', 'newark', 'london', 'tokyo',
]
