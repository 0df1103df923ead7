from typing import Dict, List, NamedTuple, Optional, Tuple

from regionspan.core import RegionId


class Region(NamedTuple):
    display_name: str
    coordinates: Tuple[float, float]
    country: str
    geo_group: str
    has_availability_zones: bool = False


GEO_GROUPS: Dict[str, str] = {
    'northamerica': 'North America',
    'latinamerica': 'Latin America',
    'europe': 'Europe',
    'asiapacific': 'Asia Pacific',
    'india': 'India',
    'middleeast': 'Middle East',
    'africa': 'Africa',
    'oceania': 'Oceania',
}

REGIONS: Dict[RegionId, Region] = {
    'eastus': Region('East US', (37.4316, -78.6569), 'United States', 'northamerica', True),
    'eastus2': Region('East US 2', (37.4316, -78.6569), 'United States', 'northamerica', True),
    'centralus': Region('Central US', (41.8780, -93.0977), 'United States', 'northamerica', True),
    'northcentralus': Region('North Central US', (41.8819, -87.6278), 'United States', 'northamerica', False),
    'southcentralus': Region('South Central US', (29.7604, -95.3698), 'United States', 'northamerica', True),
    'westcentralus': Region('West Central US', (41.1400, -104.8202), 'United States', 'northamerica', False),
    'westus': Region('West US', (37.7749, -122.4194), 'United States', 'northamerica', False),
    'westus2': Region('West US 2', (47.6062, -122.3321), 'United States', 'northamerica', True),
    'westus3': Region('West US 3', (33.4484, -112.0740), 'United States', 'northamerica', True),
    'canadacentral': Region('Canada Central', (43.6532, -79.3832), 'Canada', 'northamerica', True),
    'canadaeast': Region('Canada East', (46.8139, -71.2080), 'Canada', 'northamerica', False),
    'brazilsouth': Region('Brazil South', (-23.5505, -46.6333), 'Brazil', 'latinamerica', True),
    'chilecentral': Region('Chile Central', (-33.4489, -70.6693), 'Chile', 'latinamerica', True),
    'mexicocentral': Region('Mexico Central', (20.5881, -100.3899), 'Mexico', 'latinamerica', True),
    'northeurope': Region('North Europe', (53.3498, -6.2603), 'Ireland', 'europe', True),
    'westeurope': Region('West Europe', (52.3676, 4.9041), 'Netherlands', 'europe', True),
    'uksouth': Region('UK South', (51.5074, -0.1278), 'United Kingdom', 'europe', True),
    'ukwest': Region('UK West', (51.4816, -3.1791), 'United Kingdom', 'europe', False),
    'francecentral': Region('France Central', (48.8566, 2.3522), 'France', 'europe', True),
    'germanywestcentral': Region('Germany West Central', (50.1109, 8.6821), 'Germany', 'europe', True),
    'switzerlandnorth': Region('Switzerland North', (47.3769, 8.5417), 'Switzerland', 'europe', True),
    'swedencentral': Region('Sweden Central', (60.6749, 17.1413), 'Sweden', 'europe', True),
    'norwayeast': Region('Norway East', (59.9139, 10.7522), 'Norway', 'europe', True),
    'italynorth': Region('Italy North', (45.4642, 9.1900), 'Italy', 'europe', True),
    'polandcentral': Region('Poland Central', (52.2297, 21.0122), 'Poland', 'europe', True),
    'spaincentral': Region('Spain Central', (40.4168, -3.7038), 'Spain', 'europe', True),
    'belgiumcentral': Region('Belgium Central', (50.8503, 4.3517), 'Belgium', 'europe', True),
    'austriaeast': Region('Austria East', (48.2082, 16.3738), 'Austria', 'europe', True),
    'australiaeast': Region('Australia East', (-33.8688, 151.2093), 'Australia', 'oceania', True),
    'australiasoutheast': Region('Australia Southeast', (-37.8136, 144.9631), 'Australia', 'oceania', False),
    'newzealandnorth': Region('New Zealand North', (-36.8509, 174.7645), 'New Zealand', 'oceania', True),
    'southeastasia': Region('Southeast Asia', (1.3521, 103.8198), 'Singapore', 'asiapacific', True),
    'eastasia': Region('East Asia', (22.3193, 114.1694), 'Hong Kong', 'asiapacific', True),
    'japaneast': Region('Japan East', (35.6762, 139.6503), 'Japan', 'asiapacific', True),
    'japanwest': Region('Japan West', (34.6937, 135.5023), 'Japan', 'asiapacific', True),
    'koreacentral': Region('Korea Central', (37.5665, 126.9780), 'South Korea', 'asiapacific', True),
    'koreasouth': Region('Korea South', (35.1796, 129.0756), 'South Korea', 'asiapacific', False),
    'indonesiacentral': Region('Indonesia Central', (-6.2088, 106.8456), 'Indonesia', 'asiapacific', True),
    'malaysiawest': Region('Malaysia West', (3.1390, 101.6869), 'Malaysia', 'asiapacific', True),
    'centralindia': Region('Central India', (18.5204, 73.8567), 'India', 'india', True),
    'southindia': Region('South India', (13.0827, 80.2707), 'India', 'india', False),
    'westindia': Region('West India', (19.0760, 72.8777), 'India', 'india', False),
    'uaenorth': Region('UAE North', (25.2048, 55.2708), 'United Arab Emirates', 'middleeast', True),
    'qatarcentral': Region('Qatar Central', (25.2854, 51.5310), 'Qatar', 'middleeast', True),
    'israelcentral': Region('Israel Central', (32.0853, 34.7818), 'Israel', 'middleeast', True),
    'southafricanorth': Region('South Africa North', (-26.2041, 28.0473), 'South Africa', 'africa', True),
}


def get_region(region_id: RegionId, registry: Dict[RegionId, Region] = None) -> Optional[Region]:
    registry = REGIONS if registry is None else registry
    return registry.get(region_id)


def display_name(region_id: RegionId, registry: Dict[RegionId, Region] = None) -> str:
    """Returns the human readable name of the region, or the region id itself if the region is unknown."""
    region = get_region(region_id, registry)
    return region.display_name if region else region_id


def regions_in_group(geo_id: str, registry: Dict[RegionId, Region] = None) -> List[RegionId]:
    registry = REGIONS if registry is None else registry
    return [region_id for region_id, region in registry.items() if region.geo_group == geo_id]


def geo_group_counts(registry: Dict[RegionId, Region] = None) -> Dict[str, int]:
    """
    Counts the regions per geo group, in the order of GEO_GROUPS. Groups without regions are omitted.
    """
    registry = REGIONS if registry is None else registry

    counts = {geo_id: 0 for geo_id in GEO_GROUPS}
    for region in registry.values():
        counts[region.geo_group] = counts.get(region.geo_group, 0) + 1

    return {geo_id: count for geo_id, count in counts.items() if count > 0}
