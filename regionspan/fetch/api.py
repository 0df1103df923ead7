import logging
import os
from typing import List

import requests

from regionspan.fetch.data import RawSample

logger = logging.getLogger(__name__)

resource = os.environ.get('REGIONSPAN_API_URL', 'https://func-latency-api-001.azurewebsites.net/api')
timeout = float(os.environ.get('REGIONSPAN_API_TIMEOUT', '10'))


def fetch(base_url: str = None) -> List[RawSample]:
    """
    Fetches all raw latency measurements from the latency API.

    :param base_url: overrides the configured API url
    :return: the raw samples in the order the API returned them
    :raises RuntimeError: if the API responds with a status other than 200
    :raises ValueError: if the payload is not a JSON array
    """
    data = _get_json(f'{base_url or resource}/latency')

    if not isinstance(data, list):
        raise ValueError(f'expected a list of measurements, got {type(data).__name__}')

    result = list()

    for item in data:
        if not isinstance(item, dict):
            logger.debug('skipping non-object item %r', item)
            continue
        result.append(RawSample.from_json(item))

    return result


def _get_json(url):
    logger.debug('fetching %s', url)
    response = requests.get(url, timeout=timeout)

    if response.status_code != 200:
        raise RuntimeError(f'invalid response with code {response.status_code}')

    return response.json()
