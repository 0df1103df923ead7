import logging
import re
from datetime import datetime, timezone
from typing import Dict, Iterable, Optional, Tuple, Union

from regionspan.core import AggregatedDataset, ConnectionRecord, RegionId
from regionspan.fetch.data import RawSample
from regionspan.util import parse_latency

logger = logging.getLogger(__name__)

__fraction_pattern = re.compile(r"\.(\d+)")


def aggregate(samples: Iterable[Union[RawSample, Dict]]) -> AggregatedDataset:
    """
    Reduces raw measurements to one record per directed (source, destination) pair. Each record keeps the
    measurement with the latest timestamp (on a tie the first one seen is kept) and counts every measurement of
    the pair. Samples without source, destination or latency are skipped.

    :param samples: raw samples in any order, either as RawSample or as their JSON form
    :return: the dataset with sorted regions and the connections in the order their pair was first seen
    """
    connections: Dict[Tuple[RegionId, RegionId], ConnectionRecord] = dict()
    regions = set()
    skipped = 0

    for sample in samples:
        if isinstance(sample, dict):
            sample = RawSample.from_json(sample)

        if not (sample.source and sample.destination and sample.latency):
            skipped += 1
            continue

        # region ids are sorted and used as keys, anything but a string is malformed
        if not (isinstance(sample.source, str) and isinstance(sample.destination, str)):
            skipped += 1
            continue

        regions.add(sample.source)
        regions.add(sample.destination)

        k = (sample.source, sample.destination)
        existing = connections.get(k)

        if existing is None:
            connections[k] = ConnectionRecord(
                source=sample.source,
                destination=sample.destination,
                latency=parse_latency(sample.latency),
                latency_raw=sample.latency,
                timestamp=sample.timestamp
            )
            continue

        existing.measurement_count += 1
        if is_later(sample.timestamp, existing.timestamp):
            existing.latency = parse_latency(sample.latency)
            existing.latency_raw = sample.latency
            existing.timestamp = sample.timestamp

    if skipped:
        logger.debug('skipped %d incomplete samples', skipped)

    return AggregatedDataset(
        regions=tuple(sorted(regions)),
        connections=tuple(connections.values())
    )


def is_later(timestamp: Optional[str], other: Optional[str]) -> bool:
    """Returns true if both timestamps parse and the first one is strictly later than the second one."""
    t1 = parse_timestamp(timestamp)
    t2 = parse_timestamp(other)
    if t1 is None or t2 is None:
        return False
    return t1 > t2


def parse_timestamp(timestamp: Optional[str]) -> Optional[datetime]:
    """
    Parses an ISO 8601 timestamp such as '2024-01-01T00:05:00Z' or '2024-01-01T00:05:00.1234567+00:00'.
    Timestamps without offset are taken as UTC.

    :return: an aware datetime, or None if the timestamp cannot be parsed
    """
    if not isinstance(timestamp, str) or not timestamp:
        return None

    text = timestamp.strip()
    if text[-1:] in ('Z', 'z'):
        text = text[:-1] + '+00:00'
    # fromisoformat only accepts 3 or 6 fractional digits before python 3.11
    text = __fraction_pattern.sub(lambda m: '.' + m.group(1)[:6].ljust(6, '0'), text)

    try:
        t = datetime.fromisoformat(text)
    except ValueError:
        return None

    if t.tzinfo is None:
        t = t.replace(tzinfo=timezone.utc)

    return t
