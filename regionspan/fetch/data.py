from typing import Any, Dict, NamedTuple, Optional, Union


class RawSample(NamedTuple):
    """
    A single directional latency measurement as received from the measurement source. Fields may be None if
    they were missing on the wire.
    """
    source: Optional[str]
    destination: Optional[str]

    latency: Union[str, float, None] = None
    timestamp: Optional[str] = None

    @staticmethod
    def from_json(data: Dict[str, Any]) -> 'RawSample':
        return RawSample(
            source=data.get('source'),
            destination=data.get('destination'),
            latency=data.get('latency'),
            timestamp=data.get('timestamp')
        )
