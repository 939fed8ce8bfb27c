"""Sort keys for places.

Plain, case-sensitive lexicographic ordering. Every operation that needs
a deterministic enumeration of vertices goes through these keys.
"""

from typing import Callable, Iterable, List, Tuple

from ..domain.models import Place

SortKey = Callable[[Place], Tuple[str, str]]


def by_city(place: Place) -> Tuple[str, str]:
    """Order by city name, then region."""
    return (place.city, place.region)


def by_state(place: Place) -> Tuple[str, str]:
    """Order by region, then city name."""
    return (place.region, place.city)


def sorted_places(places: Iterable[Place], key: SortKey = by_city) -> List[Place]:
    return sorted(places, key=key)
