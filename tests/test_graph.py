import unittest

from regionspan.aggregate import aggregate
from regionspan.fetch.data import RawSample
from regionspan.graph import roundtrip, to_graph
from regionspan.regions import REGIONS
from regionspan.resolve import resolve_peers


class TestGraph(unittest.TestCase):

    def setUp(self) -> None:
        self.dataset = aggregate([
            RawSample('eastus', 'westeurope', '85.3 ms', '2024-01-01T00:00:00Z'),
            RawSample('westeurope', 'eastus', '90000 us', '2024-01-01T00:05:00Z'),
            RawSample('eastus', 'uksouth', 'n/a', '2024-01-01T00:05:00Z'),
            RawSample('eastus', 'eastus', '1 ms', '2024-01-01T00:05:00Z'),
        ])

    def test_to_graph(self):
        g = to_graph(self.dataset)

        self.assertEqual(85.3, g['eastus']['westeurope']['latency'])
        self.assertEqual(90.0, g['westeurope']['eastus']['latency'])
        self.assertEqual(1, g['eastus']['westeurope']['measurement_count'])
        self.assertFalse(g.has_edge('eastus', 'uksouth'))
        self.assertFalse(g.has_edge('eastus', 'eastus'))

    def test_node_attributes(self):
        g = to_graph(self.dataset, REGIONS, node_prefix='internet_')

        self.assertIn('internet_eastus', g.nodes)
        self.assertEqual('West Europe', g.nodes['internet_westeurope']['display_name'])
        self.assertEqual(REGIONS['westeurope'].coordinates[0], g.nodes['internet_westeurope']['lat'])

    def test_roundtrip(self):
        g = to_graph(self.dataset)

        self.assertAlmostEqual(175.3, roundtrip(g, 'eastus', 'westeurope'))
        self.assertIsNone(roundtrip(g, 'eastus', 'uksouth'))
        self.assertIsNone(roundtrip(g, 'eastus', 'atlantis'))

    def test_roundtrip_matches_peer_summary(self):
        g = to_graph(self.dataset)
        peer = [p for p in resolve_peers(self.dataset, 'eastus') if p.destination == 'westeurope'][0]

        self.assertEqual(peer.roundtrip, roundtrip(g, 'eastus', 'westeurope'))
