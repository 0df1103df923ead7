from typing import Dict, Optional

import networkx as nx

from regionspan import core
from regionspan.core import AggregatedDataset, RegionId
from regionspan.regions import Region


def to_graph(dataset: AggregatedDataset, registry: Dict[RegionId, Region] = None, node_prefix='') -> nx.DiGraph:
    """
    Creates a directed latency graph from a dataset, e.g., for visualization. Each connection with a known
    latency becomes an edge with the attributes 'latency' and 'measurement_count'.

    :param dataset: the aggregated dataset
    :param registry: if given, region nodes are annotated with display name and coordinates
    :param node_prefix: prefix for node names
    :return: a new graph
    """
    graph = nx.DiGraph()
    add_to_graph(graph, dataset, node_prefix)

    if registry:
        for region_id in dataset.regions:
            region = registry.get(region_id)
            if region is None:
                continue
            lat, lon = region.coordinates
            graph.add_node(f'{node_prefix}{region_id}', display_name=region.display_name, lat=lat, lon=lon)

    return graph


def add_to_graph(graph: nx.DiGraph, dataset: AggregatedDataset, node_prefix=''):
    for conn in dataset.connections:
        if conn.source == conn.destination:
            continue
        if conn.latency is None:
            continue

        src = f'{node_prefix}{conn.source}'
        dst = f'{node_prefix}{conn.destination}'

        graph.add_edge(src, dst, latency=conn.latency, measurement_count=conn.measurement_count)


def roundtrip(graph: nx.DiGraph, a, b) -> Optional[float]:
    """Returns the sum of the latencies of the edges a -> b and b -> a, or None if any one is missing."""
    if not graph.has_edge(a, b) or not graph.has_edge(b, a):
        return None
    return core.roundtrip(graph[a][b]['latency'], graph[b][a]['latency'])
