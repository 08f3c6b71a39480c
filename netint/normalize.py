"""
Decoding and normalization of ping sample responses

The endpoints return something like:

    {"linode-dallas": [[1670000000, "12", "0", "3"]], ...}

Only the timestamp is numeric; RTT, loss and jitter arrive as decimal
strings. Each field is validated on its own so a failure names the
destination and field that broke.
"""

import json
import logging
import math
import re
from typing import Any, Union

from .errors import MalformedResponse, MalformedMeasurement
from .models import Overview, Sample
from .regions import REGISTRY

logger = logging.getLogger(__name__)


UINT32_MAX = 2**32 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# (index, field name) of the string-encoded metrics
METRIC_FIELDS = ((1, 'rtt'), (2, 'loss'), (3, 'jitter'))

_DIGITS = re.compile(r'[0-9]+')


def decode_samples(body: Union[bytes, str]) -> dict[str, list]:
    """
    Parse a response body into raw per-destination entries.

    Args:
        body: Raw response body

    Returns:
        Dict mapping region name -> raw entry (list of measurements),
        in registry order. Keys for unknown regions are dropped.

    Raises:
        MalformedResponse: invalid JSON or unexpected shape
    """
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedResponse(f"response is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedResponse(
            f"expected a JSON object, got {type(data).__name__}"
        )

    raw: dict[str, list] = {}
    for region in REGISTRY:
        if region.label not in data:
            raise MalformedResponse(f"missing key '{region.label}'")

        entry = data[region.label]
        if not isinstance(entry, list):
            raise MalformedResponse(
                f"'{region.label}' should be an array, got {type(entry).__name__}"
            )
        raw[region.name] = entry

    extra = [k for k in data if REGISTRY.region_for_label(k) is None]
    if extra:
        logger.debug("Ignoring unknown keys in response: %s", extra)

    return raw


def _parse_epoch(value: Any, region: str) -> int:
    # bool is an int subclass; JSON true/false is not a timestamp
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedMeasurement(region, 'epoch', value, "timestamp is not numeric")

    if isinstance(value, float) and not math.isfinite(value):
        raise MalformedMeasurement(region, 'epoch', value, "timestamp is not finite")

    epoch = int(value)
    if not INT64_MIN <= epoch <= INT64_MAX:
        raise MalformedMeasurement(region, 'epoch', value, "timestamp out of int64 range")
    return epoch


def _parse_uint32(value: Any, region: str, field: str) -> int:
    if not isinstance(value, str):
        raise MalformedMeasurement(region, field, value, "expected a decimal string")

    if not _DIGITS.fullmatch(value):
        raise MalformedMeasurement(region, field, value, "not an unsigned decimal integer")

    number = int(value)
    if number > UINT32_MAX:
        raise MalformedMeasurement(region, field, value, "value exceeds 32 bits")
    return number


def normalize_measurement(raw: list, region: str) -> Sample:
    """
    Convert one raw destination entry into a Sample.

    Only the first inner measurement is used; any further entries
    are ignored.

    Args:
        raw: Outer array as found in the response
        region: Destination region name, for error reporting

    Returns:
        Sample

    Raises:
        MalformedMeasurement: on the first field that fails validation
    """
    if not raw:
        raise MalformedMeasurement(region, 'measurement', raw, "no measurements")

    measurement = raw[0]
    if not isinstance(measurement, list):
        raise MalformedMeasurement(region, 'measurement', measurement, "expected an array")
    if len(measurement) < 4:
        raise MalformedMeasurement(
            region, 'measurement', measurement,
            f"expected 4 values, got {len(measurement)}"
        )

    epoch = _parse_epoch(measurement[0], region)
    rtt, loss, jitter = (
        _parse_uint32(measurement[index], region, field)
        for index, field in METRIC_FIELDS
    )

    return Sample(epoch=epoch, rtt=rtt, loss=loss, jitter=jitter)


def build_overview(name: str, raw: dict[str, list]) -> Overview:
    """Normalize every destination entry and assemble an Overview"""
    samples = {
        region: normalize_measurement(raw[region], region)
        for region in REGISTRY.names()
    }
    return Overview(name=name, **samples)


def parse_overview(name: str, body: Union[bytes, str]) -> Overview:
    """Decode a response body and build the Overview for origin `name`"""
    return build_overview(name, decode_samples(body))
