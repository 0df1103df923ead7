import logging
from typing import Dict, Iterable, List, Optional, Set

from regionspan.core import AggregatedDataset, PeerSummary, RegionId
from regionspan.regions import REGIONS, Region, regions_in_group
from regionspan.resolve import resolve_peers

logger = logging.getLogger(__name__)


class Selection:
    """
    The selection state of a latency view: the selected source region and the set of destination regions that
    should be displayed. It is owned by the view and passed to the resolver, the dataset is never modified.
    """
    region: Optional[RegionId]
    destinations: Set[RegionId]

    def __init__(self, registry: Dict[RegionId, Region] = None, destinations: Iterable[RegionId] = None) -> None:
        super().__init__()
        self.registry = REGIONS if registry is None else registry
        self.region = None
        self.destinations = set(destinations) if destinations is not None else set(self.registry)

    def select(self, region_id: Optional[RegionId]) -> Optional[RegionId]:
        """
        Selects the given source region. Selecting the region that is already selected (or no region at all)
        clears the selection.

        :return: the selected region after the call
        """
        if not region_id or region_id == self.region:
            self.clear()
        else:
            self.region = region_id

        return self.region

    def clear(self):
        self.region = None

    def select_all(self):
        self.destinations = set(self.registry)

    def select_none(self):
        self.destinations = set()

    def toggle_destination(self, region_id: RegionId) -> bool:
        """
        Adds the region to the selected destinations, or removes it if it is already selected.

        :return: whether the region is selected after the call
        """
        if region_id in self.destinations:
            self.destinations.discard(region_id)
            return False

        self.destinations.add(region_id)
        return True

    def toggle_geo_group(self, geo_id: str):
        """
        Deselects all regions of the geo group if all of them are selected, otherwise selects all of them.
        """
        group = regions_in_group(geo_id, self.registry)

        if all(region_id in self.destinations for region_id in group):
            self.destinations.difference_update(group)
        else:
            self.destinations.update(group)

        logger.debug('toggled %s, %d destinations selected', geo_id, len(self.destinations))

    def geo_group_state(self, geo_id: str) -> str:
        """
        Returns 'active' if all regions of the geo group are selected, 'partial' if some are, and '' otherwise.
        """
        group = regions_in_group(geo_id, self.registry)
        selected = len([region_id for region_id in group if region_id in self.destinations])

        if selected == len(group):
            return 'active'
        if selected > 0:
            return 'partial'
        return ''

    def summary(self) -> str:
        total = len(self.registry)
        selected = len(self.destinations)

        if selected == total:
            return 'All regions selected'
        if selected == 0:
            return 'No regions selected'
        return f'{selected} of {total} regions selected'

    def peers(self, dataset: AggregatedDataset) -> List[PeerSummary]:
        """
        Resolves the peers of the selected region that are among the selected destinations.
        """
        if self.region is None:
            return []
        return resolve_peers(dataset, self.region, self.destinations)
