import math
import re
from numbers import Real
from typing import Optional

__unit_divisors = {
    'ms': 1,
    'us': 1000,
}

__latency_pattern = re.compile(r"([0-9.]+)\s*(us|ms)")
__number_pattern = re.compile(r"\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")


def parse_latency(value) -> Optional[float]:
    """
    Parses a raw latency value into milliseconds. Accepts strings like '10.5 ms' or '500 us', bare numbers
    (as number or string, taken as milliseconds), and returns None for anything that does not yield a finite
    number. Never raises.

    :param value: the raw latency as received from the measurement source
    :return: the latency in milliseconds, or None if it is unknown
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Real):
        return _finite(float(value))

    if not isinstance(value, str):
        return None

    m = __latency_pattern.search(value)
    if m:
        magnitude = _parse_leading_float(m.group(1))
        if magnitude is None:
            return None
        return _finite(magnitude / __unit_divisors[m.group(2)])

    return _finite(_parse_leading_float(value))


def to_latency_string(latency: float) -> str:
    """Renders a millisecond value in the raw form used by measurement sources, e.g. '85.3 ms'."""
    text = f'{round(latency, 2):.2f}'.rstrip('0').rstrip('.')
    return f'{text} ms'


def format_latency(latency: Optional[float], suffix=' ms', precision=2) -> str:
    if latency is None:
        return 'N/A'

    fmt = f'%0.{precision}f{suffix}'

    return fmt % latency


def _parse_leading_float(text: str) -> Optional[float]:
    m = __number_pattern.match(text)
    if not m:
        return None
    return float(m.group(1))


def _finite(value: Optional[float]) -> Optional[float]:
    if value is None or not math.isfinite(value):
        return None
    return value
