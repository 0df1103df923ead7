from typing import Dict, NamedTuple, Optional

from regionspan.core import AggregatedDataset, RegionId
from regionspan.regions import REGIONS, Region


class Stats(NamedTuple):
    regions: int
    connections: int
    avg_latency: Optional[float]


def summarize(dataset: AggregatedDataset, registry: Dict[RegionId, Region] = None) -> Stats:
    """
    Calculates summary statistics of a dataset. The average latency only considers connections with a known
    latency, and is None if there are none.

    :param dataset: the aggregated dataset
    :param registry: the region registry, whose size is reported if the dataset contains no regions
    """
    registry = REGIONS if registry is None else registry

    latencies = [conn.latency for conn in dataset.connections if conn.latency is not None]
    avg_latency = sum(latencies) / len(latencies) if latencies else None

    return Stats(
        regions=len(dataset.regions) if dataset.regions else len(registry),
        connections=len(dataset.connections),
        avg_latency=avg_latency
    )
