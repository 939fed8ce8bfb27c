from datetime import timedelta

import math

import pytest

from hwy.domain.errors import GraphError, GraphParseError
from hwy.domain.models import Place, Weight
from hwy.graph.codec import (
    format_duration,
    load_graph,
    parse,
    parse_duration,
    parse_place,
    places,
    pretty_print,
    serialize,
)
from hwy.graph.sorting import by_city, by_state, sorted_places


SPRINGFIELD_LINE = "Springfield,IL,39.78,-89.65;Chicago,IL,41.88,-87.63,300000,3h0m0s"


def test_parse_single_line():
    graph = parse(SPRINGFIELD_LINE)

    springfield = Place("Springfield", "IL", 39.78, -89.65)
    chicago = Place("Chicago", "IL", 41.88, -87.63)

    assert list(graph) == [springfield]
    assert graph[springfield] == {
        chicago: Weight(distance=300000.0, travel_time=timedelta(hours=3))
    }
    (origin,) = graph
    assert origin.latitude == 39.78
    assert origin.longitude == -89.65


def test_parse_skips_blank_and_comment_lines():
    text = "\n# a comment\n   \n" + SPRINGFIELD_LINE + "\n"
    graph = parse(text)
    assert len(graph) == 1


def test_parse_vertex_without_edges():
    graph = parse("Chicago,IL,41.88,-87.63")
    assert graph == {Place("Chicago", "IL"): {}}


@pytest.mark.parametrize(
    "line",
    [
        "Chicago,IL,41.88",
        "Chicago,IL,north,-87.63",
        "Chicago,IL,41.88,-87.63,extra",
        "Chicago,IL,41.88,-87.63;Gary,IN,41.59,-87.34,48000",
        "Chicago,IL,41.88,-87.63;Gary,IN,41.59,-87.34,far,40m",
        "Chicago,IL,41.88,-87.63;Gary,IN,41.59,-87.34,-5,40m",
        "Chicago,IL,41.88,-87.63;Gary,IN,41.59,-87.34,48000,forty",
        "Chicago,IL,41.88,-87.63;Gary,IN,41.59,-87.34,48000,99999999999h",
        "Chicago,IL,41.88,-87.63;Gary,IN,41.59,-87.34,48000,-10m",
        ",IL,41.88,-87.63",
    ],
)
def test_parse_rejects_malformed_line(line):
    with pytest.raises(GraphParseError) as info:
        parse("# header\n" + line)

    assert info.value.line_number == 2
    assert info.value.line == line


def test_parse_merges_places_with_conflicting_coordinates():
    text = "\n".join(
        [
            "A,XX,1.0,1.0;B,XX,2.0,2.0,10,1m0s",
            "B,XX,2.5,2.5;A,XX,1.0,1.0,10,1m0s",
        ]
    )
    graph = parse(text)

    assert len(graph) == 2
    b = next(p for p in graph if p.city == "B")
    # first coordinates seen win
    assert (b.latitude, b.longitude) == (2.0, 2.0)


def test_parse_repeated_origin_merges_edges():
    text = "\n".join(
        [
            "A,XX,1,1;B,XX,2,2,10,1m0s",
            "A,XX,1,1;C,XX,3,3,20,2m0s",
        ]
    )
    graph = parse(text)
    assert set(graph[Place("A", "XX")]) == {Place("B", "XX"), Place("C", "XX")}


def test_parse_place():
    place = parse_place("Salt Lake City,UT,40.76,-111.89")
    assert place.city == "Salt Lake City"
    assert place.region == "UT"
    assert place.name == "Salt Lake City,UT"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("3h0m0s", timedelta(hours=3)),
        ("1h30m", timedelta(hours=1, minutes=30)),
        ("45.5s", timedelta(seconds=45.5)),
        ("250ms", timedelta(milliseconds=250)),
        ("1.5h", timedelta(minutes=90)),
        ("0", timedelta(0)),
        ("0s", timedelta(0)),
        ("-2m", timedelta(minutes=-2)),
    ],
)
def test_parse_duration(text, expected):
    assert parse_duration(text) == expected


@pytest.mark.parametrize("text", ["", "3", "h", "3x", "1h30", "99999999999h"])
def test_parse_duration_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_duration(text)


def test_negative_travel_time_never_reaches_the_graph():
    text = "\n".join(
        [
            "A,XX,1,1;B,XX,2,2,10,1m;C,XX,3,3,10,5m",
            "C,XX,3,3;B,XX,2,2,10,-10m",
        ]
    )
    with pytest.raises(GraphParseError) as info:
        parse(text)
    assert info.value.line_number == 2


@pytest.mark.parametrize(
    "duration, expected",
    [
        (timedelta(0), "0s"),
        (timedelta(hours=3), "3h0m0s"),
        (timedelta(minutes=1, seconds=30), "1m30s"),
        (timedelta(seconds=45), "45s"),
        (timedelta(seconds=1.5), "1.5s"),
        (timedelta(milliseconds=250), "250ms"),
    ],
)
def test_format_duration(duration, expected):
    assert format_duration(duration) == expected


def test_serialize_round_trip():
    text = "\n".join(
        [
            "Chicago,IL,41.878114,-87.629798;Springfield,IL,39.781721,-89.650148,324000,3h5m0s;Gary,IN,41.593370,-87.346427,48270.5,35m12s",
            "Springfield,IL,39.781721,-89.650148;Chicago,IL,41.878114,-87.629798,324000,3h5m0s",
            "Gary,IN,41.593370,-87.346427",
        ]
    )
    graph = parse(text)
    again = parse(serialize(graph))

    assert set(again) == set(graph)
    for origin, edges in graph.items():
        assert set(again[origin]) == set(edges)
        for destination, weight in edges.items():
            other = again[origin][destination]
            assert math.isclose(other.distance, weight.distance)
            assert other.travel_time == weight.travel_time

    for place in again:
        original = next(p for p in graph if p == place)
        assert math.isclose(place.latitude, original.latitude, abs_tol=1e-6)
        assert math.isclose(place.longitude, original.longitude, abs_tol=1e-6)


def test_serialize_line_format():
    text = serialize(parse(SPRINGFIELD_LINE))
    assert text == (
        "Springfield,IL,39.780000,-89.650000;"
        "Chicago,IL,41.880000,-87.630000,300000,3h0m0s\n"
    )


def test_serialize_empty_graph():
    assert serialize({}) == ""


def test_places_are_unique_vertices():
    graph = parse(SPRINGFIELD_LINE)
    assert places(graph) == [Place("Springfield", "IL")]


def test_sorting_keys():
    a = Place("Albany", "NY")
    b = Place("Boise", "ID")
    c = Place("Albany", "GA")

    assert sorted_places([a, b, c], key=by_city) == [c, a, b]
    assert sorted_places([a, b, c], key=by_state) == [c, b, a]


def test_sorting_is_case_sensitive():
    upper = Place("Zion", "UT")
    lower = Place("avalon", "CA")
    assert sorted_places([lower, upper]) == [upper, lower]


def test_load_graph_reads_file(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text(SPRINGFIELD_LINE + "\n", encoding="utf-8")

    graph = load_graph(path)
    assert Place("Springfield", "IL") in graph


def test_load_graph_missing_file(tmp_path):
    with pytest.raises(GraphError) as info:
        load_graph(tmp_path / "nope.txt")
    assert info.value.file_path.endswith("nope.txt")


def test_pretty_print_uses_miles():
    out = pretty_print(parse(SPRINGFIELD_LINE))
    assert out.startswith("Springfield, IL (39.78, -89.65)\n")
    assert "186.4mi" in out
    assert "3h0m0s" in out
