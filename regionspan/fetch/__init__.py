from regionspan.fetch import api
from regionspan.fetch.data import RawSample

name = 'fetch'

sources = {
    'api': api,
}

__all__ = [
    'RawSample',
    'sources'
]
