from dataclasses import dataclass
from typing import Dict, NamedTuple, Optional, Tuple, Union

RegionId = str
"""
Opaque key of a cloud region, e.g. 'westeurope'. The aggregation treats it as an uninterpreted identifier, the
region registry maps it to display metadata.
"""

Latency = Optional[float]
"""
A latency in milliseconds, or None if it is unknown. Unknown latencies are never treated as zero.
"""


def average(forward: Latency, reverse: Latency) -> Latency:
    """
    The mean of both legs if both are known, otherwise the one that is known, otherwise None.
    """
    if forward is not None and reverse is not None:
        return (forward + reverse) / 2
    if forward is not None:
        return forward
    return reverse


def roundtrip(forward: Latency, reverse: Latency) -> Latency:
    """
    The round-trip time (forward + reverse). Unlike the average, it is None if any one of the legs is missing.
    """
    if forward is None or reverse is None:
        return None
    return forward + reverse


@dataclass
class ConnectionRecord:
    """
    The canonical record of a directed (source, destination) pair. It holds the latest measurement seen for the
    pair and the number of measurements that were folded into it.
    """
    source: RegionId
    destination: RegionId
    latency: Latency
    latency_raw: Union[str, float, None]
    timestamp: Optional[str]
    measurement_count: int = 1

    @property
    def key(self) -> Tuple[RegionId, RegionId]:
        return self.source, self.destination


class AggregatedDataset(NamedTuple):
    regions: Tuple[RegionId, ...]
    connections: Tuple[ConnectionRecord, ...]

    def index(self) -> Dict[Tuple[RegionId, RegionId], ConnectionRecord]:
        return {conn.key: conn for conn in self.connections}

    def get(self, source: RegionId, destination: RegionId) -> Optional[ConnectionRecord]:
        for conn in self.connections:
            if conn.source == source and conn.destination == destination:
                return conn
        return None


class PeerSummary(NamedTuple):
    """
    The bidirectional view of a region pair, as seen from a selected source region.
    """
    destination: RegionId
    forward_latency: Latency
    reverse_latency: Latency
    avg_latency: Latency
    forward_count: int = 0
    reverse_count: int = 0

    @property
    def roundtrip(self) -> Latency:
        """The round-trip time, i.e., forward + reverse latency. None unless both legs are known."""
        return roundtrip(self.forward_latency, self.reverse_latency)

    @property
    def total_count(self) -> int:
        return self.forward_count + self.reverse_count
