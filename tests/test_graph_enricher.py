"""Tests for GraphEnricher with in-test fake collaborators."""

from datetime import timedelta
from typing import Dict, Optional

from hwy.domain.errors import DistanceLookupError, GeocodingError
from hwy.domain.models import GeoLocation, Place, Weight
from hwy.services.graph_enricher import GraphEnricher


CHICAGO = Place("Chicago", "IL")
SPRINGFIELD = Place("Springfield", "IL")
NOWHERE = Place("Nowhere", "ZZ")
GARY = Place("Gary", "IN")


class FakeGeocoder:
    def __init__(self, answers: Dict[str, object]):
        self.answers = answers
        self.queries = []

    def resolve_location(self, name: str) -> Optional[GeoLocation]:
        self.queries.append(name)
        answer = self.answers.get(name)
        if isinstance(answer, Exception):
            raise answer
        return answer


class FakeDistances:
    def __init__(self, rows):
        self.rows = rows

    def resolve_travel(self, origin, destinations):
        row = self.rows[origin]
        if isinstance(row, Exception):
            raise row
        return row


def test_locate_fills_coordinates_and_collects_failures():
    graph = {
        CHICAGO: {SPRINGFIELD: Weight(), NOWHERE: Weight()},
        SPRINGFIELD: {CHICAGO: Weight()},
        GARY: {},
    }
    geocoder = FakeGeocoder(
        {
            "Chicago, IL": GeoLocation(41.88, -87.63),
            "Springfield, IL": GeoLocation(39.78, -89.65),
            "Gary, IN": GeocodingError("service down", query="Gary, IN"),
        }
    )
    enricher = GraphEnricher(geocoder=geocoder, distances=FakeDistances({}))

    result = enricher.locate(graph)

    assert not result.ok
    failed = {f.place: f.reason for f in result.failures}
    assert set(failed) == {NOWHERE, GARY}
    assert failed[NOWHERE] == "no result"
    assert "service down" in failed[GARY]

    # every place was attempted exactly once
    assert sorted(geocoder.queries) == sorted(
        ["Chicago, IL", "Springfield, IL", "Nowhere, ZZ", "Gary, IN"]
    )

    chicago = next(p for p in result.graph if p == CHICAGO)
    assert (chicago.latitude, chicago.longitude) == (41.88, -87.63)
    springfield = next(p for p in result.graph[chicago] if p == SPRINGFIELD)
    assert springfield.latitude == 39.78
    # unresolved places are kept unchanged
    assert GARY in result.graph
    assert NOWHERE in result.graph[chicago]


def test_locate_does_not_modify_input():
    graph = {CHICAGO: {}}
    enricher = GraphEnricher(
        geocoder=FakeGeocoder({"Chicago, IL": GeoLocation(41.88, -87.63)}),
        distances=FakeDistances({}),
    )
    enricher.locate(graph)
    (original,) = graph
    assert original.latitude == 0.0


def test_measure_sets_weights_and_keeps_zero_on_failure():
    graph = {
        CHICAGO: {SPRINGFIELD: Weight(), GARY: Weight()},
        SPRINGFIELD: {CHICAGO: Weight()},
        GARY: {CHICAGO: Weight()},
    }
    measured = Weight(distance=324000, travel_time=timedelta(hours=3))
    distances = FakeDistances(
        {
            CHICAGO: {SPRINGFIELD: measured, GARY: ValueError("ambiguous")},
            SPRINGFIELD: {CHICAGO: measured},
            GARY: DistanceLookupError("quota exceeded", origin="Gary,IN"),
        }
    )
    enricher = GraphEnricher(geocoder=FakeGeocoder({}), distances=distances)

    result = enricher.measure(graph)

    assert result.graph[CHICAGO][SPRINGFIELD] == measured
    assert result.graph[SPRINGFIELD][CHICAGO] == measured
    assert result.graph[CHICAGO][GARY].is_unset
    assert result.graph[GARY][CHICAGO].is_unset

    failed = {(f.place, f.destination): f.reason for f in result.failures}
    assert failed[(CHICAGO, GARY)] == "ambiguous"
    assert "quota exceeded" in failed[(GARY, CHICAGO)]
    assert len(failed) == 2

    # the input graph is untouched
    assert graph[CHICAGO][SPRINGFIELD].is_unset


def test_measure_reports_missing_answers():
    graph = {CHICAGO: {SPRINGFIELD: Weight()}}
    enricher = GraphEnricher(
        geocoder=FakeGeocoder({}), distances=FakeDistances({CHICAGO: {}})
    )

    result = enricher.measure(graph)

    assert [f.reason for f in result.failures] == ["missing from response"]


def test_measure_only_unset_skips_known_edges():
    known = Weight(distance=1.0, travel_time=timedelta(minutes=1))
    graph = {CHICAGO: {SPRINGFIELD: known, GARY: Weight()}}
    fresh = Weight(distance=2.0, travel_time=timedelta(minutes=2))

    class Recording(FakeDistances):
        asked = []

        def resolve_travel(self, origin, destinations):
            self.asked.extend(destinations)
            return {d: fresh for d in destinations}

    distances = Recording({})
    result = GraphEnricher(geocoder=FakeGeocoder({}), distances=distances).measure(
        graph, only_unset=True
    )

    assert distances.asked == [GARY]
    assert result.graph[CHICAGO][SPRINGFIELD] == known
    assert result.graph[CHICAGO][GARY] == fresh
    assert result.ok
