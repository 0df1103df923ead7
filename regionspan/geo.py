from typing import Tuple

import numpy as np

earth_radius = 6371
"mean earth radius in kilometers"

Coordinates = Tuple[float, float]
"(latitude, longitude) in degrees"


def distance(p1: Coordinates, p2: Coordinates) -> float:
    """
    Calculates the great-circle distance between two points using the haversine formula.

    :param p1: (latitude, longitude) of the first point in degrees
    :param p2: (latitude, longitude) of the second point in degrees
    :return: the distance in kilometers
    """
    lat1, lon1 = np.radians(p1)
    lat2, lon2 = np.radians(p2)

    a = np.sin((lat2 - lat1) / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin((lon2 - lon1) / 2) ** 2
    a = np.clip(a, 0, 1)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))

    return float(earth_radius * c)
