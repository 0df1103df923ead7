from typing import NamedTuple, Optional, Tuple


class Band(NamedTuple):
    """
    A severity band. The name (e.g. used as CSS class or label) and the color are two facets of the same band.
    """
    name: str
    color: str


excellent = Band('excellent', '#00ff88')
good = Band('good', '#88ff00')
fair = Band('fair', '#ffdd00')
poor = Band('poor', '#ff8800')
bad = Band('bad', '#ff4444')
unknown = Band('unknown', '#666666')

bands = (excellent, good, fair, poor, bad)
"all bands ordered from best to worst, excluding the unknown band"

latency_bounds = (10, 30, 80, 150)
"upper bounds (exclusive) in ms of the one-way latency bands excellent, good, fair and poor"
rtt_bounds = (20, 60, 160, 300)
"upper bounds (exclusive) in ms of the round-trip time bands excellent, good, fair and poor"


def classify(value: Optional[float], bounds: Tuple[float, ...]) -> Band:
    """
    Maps a value to the first band whose upper bound is greater than the value. A value equal to a bound falls
    into the next (worse) band, values beyond the last bound are bad, and None is unknown.
    """
    if value is None:
        return unknown

    for band, bound in zip(bands, bounds):
        if value < bound:
            return band

    return bands[-1]


def classify_latency(latency: Optional[float]) -> Band:
    return classify(latency, latency_bounds)


def classify_rtt(rtt: Optional[float]) -> Band:
    return classify(rtt, rtt_bounds)
