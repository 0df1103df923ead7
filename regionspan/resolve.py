from typing import Collection, List, Optional

from regionspan.core import AggregatedDataset, PeerSummary, RegionId, average


def find_peers(dataset: AggregatedDataset, source: RegionId,
               destinations: Optional[Collection[RegionId]] = None) -> List[RegionId]:
    """
    Returns all regions that have a connection to or from the source region, in the order they were first seen.

    :param dataset: the dataset to search
    :param source: the selected region
    :param destinations: if set, only peers in this collection are returned
    """
    peers = dict()

    for conn in dataset.connections:
        if conn.source == source and conn.destination != source:
            peers[conn.destination] = True
        if conn.destination == source and conn.source != source:
            peers[conn.source] = True

    if destinations is not None:
        return [peer for peer in peers if peer in destinations]

    return list(peers)


def resolve_peers(dataset: AggregatedDataset, source: RegionId,
                  destinations: Optional[Collection[RegionId]] = None) -> List[PeerSummary]:
    """
    Joins the forward (source -> peer) and reverse (peer -> source) connections of the source region with each
    of its peers. The result is sorted by average latency, peers without any known latency come last.

    :param dataset: the aggregated dataset
    :param source: the selected region
    :param destinations: if set, only peers in this collection are considered
    :return: one summary per peer
    """
    index = dataset.index()
    result = list()

    for peer in find_peers(dataset, source, destinations):
        forward = index.get((source, peer))
        reverse = index.get((peer, source))

        forward_latency = forward.latency if forward else None
        reverse_latency = reverse.latency if reverse else None

        result.append(PeerSummary(
            destination=peer,
            forward_latency=forward_latency,
            reverse_latency=reverse_latency,
            avg_latency=average(forward_latency, reverse_latency),
            forward_count=forward.measurement_count if forward else 0,
            reverse_count=reverse.measurement_count if reverse else 0
        ))

    result.sort(key=_sort_key)
    return result


def _sort_key(summary: PeerSummary):
    # unknown averages go last, the sort is stable so they keep their order
    if summary.avg_latency is None:
        return 1, 0.0
    return 0, summary.avg_latency
