"""Tests for the clip path serializer."""

from clipgrad.clip.parser import parse_path
from clipgrad.clip.serializer import format_clip, serialize_path
from clipgrad.models.path import ClipPath, Vertex, VertexKind
from tests.conftest import CURVE_CLIP, SCALED_CLIP, SQUARE_CLIP


def test_serialize_compresses_repeated_commands():
    path, _ = parse_path("m 0 0 l 10 0 l 10 10 l 0 10")
    assert serialize_path(path) == "m 0 0 l 10 0 10 10 0 10"


def test_round_trip_square():
    path, _ = parse_path(SQUARE_CLIP)
    assert serialize_path(path) == SQUARE_CLIP
    again, _ = parse_path(serialize_path(path))
    assert again == path


def test_round_trip_curve():
    path, _ = parse_path(CURVE_CLIP)
    again, _ = parse_path(serialize_path(path))
    assert again.vertices == path.vertices


def test_serialize_is_idempotent():
    path, _ = parse_path("m 0 0 l 10 0 l 10 10 b 5 15 0 15 0 10")
    once = serialize_path(path)
    twice = serialize_path(parse_path(once)[0])
    assert once == twice


def test_format_clip_includes_exponent():
    path, _ = parse_path(SCALED_CLIP)
    assert format_clip(path) == "3,m 0 0 l 400 0 400 200 0 200"


def test_serialize_empty():
    assert serialize_path(ClipPath()) == ""


def test_serialize_rounds_half_up():
    path = ClipPath((Vertex(VertexKind.MOVE, 0, 0), Vertex(VertexKind.LINE, 2.5, -2.5)))
    assert serialize_path(path) == "m 0 0 l 3 -2"
