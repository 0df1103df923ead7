import logging
import random
from typing import Callable, Dict, Iterable

import requests

from regionspan import synthetic
from regionspan.aggregate import aggregate
from regionspan.core import AggregatedDataset, RegionId
from regionspan.fetch import api
from regionspan.fetch.data import RawSample
from regionspan.regions import Region

logger = logging.getLogger(__name__)


def load_dataset(fetch: Callable[[], Iterable[RawSample]] = api.fetch, registry: Dict[RegionId, Region] = None,
                 rnd: random.Random = None) -> AggregatedDataset:
    """
    Loads and aggregates the latest latency measurements. If the measurements cannot be retrieved, a synthetic
    dataset is generated instead, so callers always receive a complete dataset. The source is queried exactly
    once.

    :param fetch: the function that retrieves the raw samples
    :param registry: the region registry used for the synthetic dataset
    :param rnd: the source of randomness for the synthetic dataset
    :return: the aggregated dataset
    """
    try:
        samples = fetch()
    except (requests.RequestException, RuntimeError, ValueError) as e:
        logger.warning('error loading latency data, using synthetic data instead: %s', e)
        return synthetic.generate(registry, rnd)

    dataset = aggregate(samples)
    logger.info('loaded %d connections between %d regions', len(dataset.connections), len(dataset.regions))
    return dataset
