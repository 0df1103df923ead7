import logging
import random
from datetime import datetime, timezone
from typing import Dict

from regionspan.core import AggregatedDataset, ConnectionRecord, RegionId
from regionspan.geo import distance
from regionspan.regions import REGIONS, Region
from regionspan.util import to_latency_string

logger = logging.getLogger(__name__)

km_per_ms = 100
"rough propagation estimate: ~1 ms of latency per 100 km"
max_jitter = 10
"upper bound of the uniform random jitter in ms added to each estimate"


def estimate_latency(region: Region, other: Region, rnd: random.Random = None) -> float:
    rnd = rnd or random
    latency = distance(region.coordinates, other.coordinates) / km_per_ms + rnd.uniform(0, max_jitter)
    return round(latency, 2)


def generate(registry: Dict[RegionId, Region] = None, rnd: random.Random = None) -> AggregatedDataset:
    """
    Synthesizes a plausible latency dataset for all ordered pairs of distinct regions in the registry, based on
    the great-circle distance between them. Used in place of real measurements if they cannot be loaded.

    :param registry: the region registry, defaults to all known regions
    :param rnd: the source of randomness, pass a seeded random.Random for reproducible datasets
    :return: a dataset with the same shape as an aggregated one
    """
    registry = REGIONS if registry is None else registry
    timestamp = datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')

    connections = list()

    for source, region in registry.items():
        for destination, other in registry.items():
            if source == destination:
                continue

            latency = estimate_latency(region, other, rnd)
            connections.append(ConnectionRecord(
                source=source,
                destination=destination,
                latency=latency,
                latency_raw=to_latency_string(latency),
                timestamp=timestamp
            ))

    logger.debug('generated %d synthetic connections for %d regions', len(connections), len(registry))

    return AggregatedDataset(
        regions=tuple(sorted(registry)),
        connections=tuple(connections)
    )
