"""Reading and writing graphs in the canonical text format.

One line per vertex::

    city,region,lat,lon;city,region,lat,lon,meters,duration;...

The first ``;``-separated token is the origin place; every following
token is a destination place followed by the edge weight. Durations use
Go's duration syntax (``3h0m0s``, ``1h30m``, ``250ms``) because that is
how the data files were originally produced. Blank lines and lines
starting with ``#`` are skipped.

A malformed line raises GraphParseError with its line number; nothing
is silently defaulted.
"""

from __future__ import annotations

import logging
import math
import re
from datetime import timedelta
from pathlib import Path
from typing import Dict, List, Sequence, Union

from ..domain.errors import GraphError, GraphParseError
from ..domain.models import EdgeMap, Graph, Place, Weight
from .sorting import by_city, by_state

MAJOR_SEP = ";"
MINOR_SEP = ","

# Meters in 1 mile.
MILES_TO_METERS = 1609.344
# Miles in 1 meter.
METERS_TO_MILES = 1 / MILES_TO_METERS

_PLACE_FIELDS = 4
_EDGE_FIELDS = 6

_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")
_DURATION_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_logger = logging.getLogger(__name__)


def parse_duration(text: str) -> timedelta:
    """Parse a Go-style duration string such as ``3h0m0s`` or ``1.5h``.

    Raises:
        ValueError: If the string is not a valid duration.
    """
    s = text.strip()
    sign = 1
    if s[:1] in ("+", "-"):
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    if s == "0":
        return timedelta(0)
    if not s:
        raise ValueError(f"invalid duration {text!r}")

    seconds = 0.0
    pos = 0
    while pos < len(s):
        match = _DURATION_PART.match(s, pos)
        if match is None:
            raise ValueError(f"invalid duration {text!r}")
        seconds += float(match.group(1)) * _DURATION_UNITS[match.group(2)]
        pos = match.end()
    try:
        return timedelta(seconds=sign * seconds)
    except OverflowError:
        raise ValueError(f"invalid duration {text!r}") from None


def _fraction(value: int, unit: int) -> str:
    whole, frac = divmod(value, unit)
    if frac == 0:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{frac:0{digits}d}".rstrip("0")


def format_duration(duration: timedelta) -> str:
    """Format a timedelta the way Go's ``Duration.String`` does."""
    micros = duration // timedelta(microseconds=1)
    if micros == 0:
        return "0s"
    sign = "-" if micros < 0 else ""
    micros = abs(micros)

    if micros < 1_000:
        return f"{sign}{micros}µs"
    if micros < 1_000_000:
        return f"{sign}{_fraction(micros, 1_000)}ms"

    hours, rest = divmod(micros, 3_600_000_000)
    minutes, rest = divmod(rest, 60_000_000)
    out = sign
    if hours:
        out += f"{hours}h"
    if hours or minutes:
        out += f"{minutes}m"
    return out + f"{_fraction(rest, 1_000_000)}s"


def _format_float(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def _parse_float(text: str, what: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise ValueError(f"{what} is not a number: {text!r}") from None
    if not math.isfinite(value):
        raise ValueError(f"{what} is not finite: {text!r}")
    return value


def _place_from_fields(fields: Sequence[str]) -> Place:
    if len(fields) < _PLACE_FIELDS:
        raise ValueError(
            f"expected city,region,latitude,longitude; got {MINOR_SEP.join(fields)!r}"
        )
    city, region = fields[0].strip(), fields[1].strip()
    if not city or not region:
        raise ValueError("city and region must not be empty")
    return Place(
        city=city,
        region=region,
        latitude=_parse_float(fields[2].strip(), "latitude"),
        longitude=_parse_float(fields[3].strip(), "longitude"),
    )


def parse_place(text: str) -> Place:
    """Parse ``city,region,latitude,longitude`` into a Place.

    Raises:
        ValueError: If a field is missing or not numeric.
    """
    return _place_from_fields(text.split(MINOR_SEP))


def parse_weight(distance: str, duration: str) -> Weight:
    """Parse the two weight fields of an edge token.

    Raises:
        ValueError: If the distance is negative or not numeric, or the
            duration is malformed or negative.
    """
    meters = _parse_float(distance.strip(), "distance")
    if meters < 0:
        raise ValueError(f"distance must not be negative: {distance!r}")
    travel_time = parse_duration(duration)
    if travel_time < timedelta(0):
        raise ValueError(f"travel time must not be negative: {duration!r}")
    return Weight(distance=meters, travel_time=travel_time)


def _parse_edge(token: str) -> tuple[Place, Weight]:
    fields = token.split(MINOR_SEP)
    if len(fields) != _EDGE_FIELDS:
        raise ValueError(
            f"expected city,region,latitude,longitude,meters,duration; got {token!r}"
        )
    return _place_from_fields(fields[:_PLACE_FIELDS]), parse_weight(fields[4], fields[5])


def parse(text: str) -> Graph:
    """Parse graph text into a Graph.

    Places that share a city and region are the same vertex. When one is
    seen again with different coordinates, the first coordinates are
    kept and a warning is logged. A repeated origin line merges its edges
    into the existing vertex.

    Raises:
        GraphParseError: For the first malformed line.
    """
    graph: Graph = {}
    known: Dict[Place, Place] = {}

    def intern(place: Place) -> Place:
        canonical = known.setdefault(place, place)
        if (canonical.latitude, canonical.longitude) != (
            place.latitude,
            place.longitude,
        ):
            _logger.warning(
                "Conflicting coordinates, keeping first",
                extra={
                    "place": place.name,
                    "kept": (canonical.latitude, canonical.longitude),
                    "ignored": (place.latitude, place.longitude),
                },
            )
        return canonical

    for number, line in enumerate(text.splitlines(), start=1):
        if not line.strip() or line.startswith("#"):
            continue

        tokens = line.split(MAJOR_SEP)
        try:
            if len(tokens[0].split(MINOR_SEP)) > _PLACE_FIELDS:
                raise ValueError(f"origin has extra fields: {tokens[0]!r}")
            origin = intern(parse_place(tokens[0]))
            edges: EdgeMap = {}
            for token in tokens[1:]:
                destination, weight = _parse_edge(token)
                edges[intern(destination)] = weight
        except ValueError as e:
            raise GraphParseError(
                f"Malformed graph line {number}",
                cause=e,
                line_number=number,
                line=line,
            ) from e

        if origin in graph:
            _logger.warning(
                "Origin listed more than once, merging edges",
                extra={"place": origin.name, "line_number": number},
            )
            graph[origin].update(edges)
        else:
            graph[origin] = edges

    _logger.debug("Graph parsed", extra={"vertices": len(graph)})
    return graph


def _format_place(place: Place) -> str:
    return MINOR_SEP.join(
        [place.city, place.region, f"{place.latitude:f}", f"{place.longitude:f}"]
    )


def _format_weight(weight: Weight) -> str:
    return f"{_format_float(weight.distance)}{MINOR_SEP}{format_duration(weight.travel_time)}"


def serialize(graph: Graph) -> str:
    """Write a Graph in the canonical text format.

    Lines are ordered by region then city, and edges by city then region.
    The ordering is a convenience for diffing, not part of the format.
    """
    lines = []
    for origin in sorted(graph, key=by_state):
        tokens = [_format_place(origin)]
        for destination in sorted(graph[origin], key=by_city):
            weight = graph[origin][destination]
            tokens.append(
                f"{_format_place(destination)}{MINOR_SEP}{_format_weight(weight)}"
            )
        lines.append(MAJOR_SEP.join(tokens) + "\n")
    return "".join(lines)


def places(graph: Graph) -> List[Place]:
    """Return the unique vertices of the graph, in no particular order.

    Use ``hwy.graph.sorting`` to get a deterministic order.
    """
    return list(graph)


def load_graph(path: Union[str, Path]) -> Graph:
    """Read and parse a graph text file.

    Raises:
        GraphError: If the file cannot be read.
        GraphParseError: If a line is malformed.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise GraphError(
            f"Failed to read graph file {path}",
            cause=e,
            file_path=str(path),
        ) from e
    return parse(text)


def pretty_print(graph: Graph) -> str:
    """Render the graph as an indented table with distances in miles."""
    blocks = []
    for origin in sorted(graph, key=by_state):
        rows = [
            f"{origin.city}, {origin.region} "
            f"({origin.latitude:g}, {origin.longitude:g})"
        ]
        for destination in sorted(graph[origin], key=by_city):
            weight = graph[origin][destination]
            rows.append(
                f"\t{destination.city:<16}{destination.region:>3}"
                f"{weight.distance * METERS_TO_MILES:7.1f}mi"
                f"{format_duration(weight.travel_time):>10}"
            )
        blocks.append("\n".join(rows) + "\n")
    return "\n".join(blocks)
