import unittest

from regionspan.aggregate import aggregate
from regionspan.fetch.data import RawSample
from regionspan.regions import GEO_GROUPS, REGIONS, Region, display_name, geo_group_counts, regions_in_group
from regionspan.selection import Selection

registry = {
    'eastus': Region('East US', (37.4316, -78.6569), 'United States', 'northamerica', True),
    'westus': Region('West US', (37.7749, -122.4194), 'United States', 'northamerica', False),
    'westeurope': Region('West Europe', (52.3676, 4.9041), 'Netherlands', 'europe', True),
}


class TestRegions(unittest.TestCase):

    def test_registry(self):
        for region in REGIONS.values():
            self.assertIn(region.geo_group, GEO_GROUPS)
            lat, lon = region.coordinates
            self.assertTrue(-90 <= lat <= 90)
            self.assertTrue(-180 <= lon <= 180)

    def test_display_name(self):
        self.assertEqual('West Europe', display_name('westeurope'))
        self.assertEqual('atlantis', display_name('atlantis'))

    def test_geo_groups(self):
        self.assertEqual(['eastus', 'westus'], regions_in_group('northamerica', registry))
        self.assertEqual({'northamerica': 2, 'europe': 1}, geo_group_counts(registry))
        self.assertEqual(len(REGIONS), sum(geo_group_counts().values()))


class TestSelection(unittest.TestCase):

    def test_all_destinations_selected_initially(self):
        selection = Selection(registry)
        self.assertEqual(set(registry), selection.destinations)
        self.assertIsNone(selection.region)
        self.assertEqual('All regions selected', selection.summary())

    def test_select_toggles(self):
        selection = Selection(registry)

        self.assertEqual('eastus', selection.select('eastus'))
        self.assertEqual('westus', selection.select('westus'))
        self.assertIsNone(selection.select('westus'))
        self.assertEqual('eastus', selection.select('eastus'))
        self.assertIsNone(selection.select(None))

    def test_toggle_geo_group(self):
        selection = Selection(registry)

        selection.toggle_geo_group('northamerica')
        self.assertEqual({'westeurope'}, selection.destinations)
        self.assertEqual('', selection.geo_group_state('northamerica'))
        self.assertEqual('active', selection.geo_group_state('europe'))
        self.assertEqual('1 of 3 regions selected', selection.summary())

        selection.toggle_geo_group('europe')
        self.assertEqual('No regions selected', selection.summary())

        selection.toggle_geo_group('northamerica')
        self.assertEqual({'eastus', 'westus'}, selection.destinations)

    def test_select_all_and_none(self):
        selection = Selection(registry, destinations=['eastus'])

        selection.select_none()
        self.assertEqual(set(), selection.destinations)
        self.assertEqual('No regions selected', selection.summary())
        self.assertEqual('', selection.geo_group_state('europe'))

        selection.select_all()
        self.assertEqual(set(registry), selection.destinations)
        self.assertEqual('All regions selected', selection.summary())

    def test_toggle_destination(self):
        selection = Selection(registry)

        self.assertFalse(selection.toggle_destination('westus'))
        self.assertEqual({'eastus', 'westeurope'}, selection.destinations)
        self.assertEqual('partial', selection.geo_group_state('northamerica'))
        self.assertEqual('2 of 3 regions selected', selection.summary())

        self.assertTrue(selection.toggle_destination('westus'))
        self.assertEqual('active', selection.geo_group_state('northamerica'))

    def test_partial_group(self):
        selection = Selection(registry, destinations=['eastus'])
        self.assertEqual('partial', selection.geo_group_state('northamerica'))

        selection.toggle_geo_group('northamerica')
        self.assertEqual({'eastus', 'westus'}, selection.destinations)
        self.assertEqual('active', selection.geo_group_state('northamerica'))

    def test_peers(self):
        dataset = aggregate([
            RawSample('eastus', 'westus', '30 ms', '2024-01-01T00:00:00Z'),
            RawSample('westeurope', 'eastus', '80 ms', '2024-01-01T00:00:00Z'),
        ])
        selection = Selection(registry)

        self.assertEqual([], selection.peers(dataset))

        selection.select('eastus')
        self.assertEqual(['westus', 'westeurope'], [p.destination for p in selection.peers(dataset)])

        selection.toggle_geo_group('europe')
        self.assertEqual(['westus'], [p.destination for p in selection.peers(dataset)])
