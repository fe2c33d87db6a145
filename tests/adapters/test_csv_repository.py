"""Tests for the CSV host graph repository."""

import pytest

from graphpath.adapters.host import CSVHostGraphRepository
from graphpath.adapters.host.csv_repository import parse_edge_header
from graphpath.config import HostGraphConfig
from graphpath.domain.errors import HostGraphError, SchemaError
from graphpath.domain.tuples import AttributeType, decode_tuple, read_weight


def write_graph(tmp_path, vertices, edges):
    (tmp_path / "vertices.csv").write_text(vertices, encoding="utf-8")
    (tmp_path / "edges.csv").write_text(edges, encoding="utf-8")
    return CSVHostGraphRepository(HostGraphConfig(data_dir=tmp_path))


def test_load_vertices_and_edges(tmp_path):
    repo = write_graph(
        tmp_path,
        "vertex_id\n1\n2\n3\n5\n",
        "id1,id2,label:string,weight:int\n1,2,north,5\n2,3,east,7\n",
    )
    graph = repo.load()

    assert [v.id for v in graph.vertices()] == [1, 2, 3, 5]
    edges = list(graph.edges())
    assert [(e.id1, e.id2) for e in edges] == [(1, 2), (2, 3)]
    assert [read_weight(e.tuple) for e in edges] == [5, 7]
    assert decode_tuple(edges[0].tuple) == {"label": "north", "weight": 5}


def test_blank_lines_are_skipped(tmp_path):
    repo = write_graph(
        tmp_path,
        "vertex_id\n1\n\n2\n",
        "id1,id2,weight:int\n\n1,2,3\n\n",
    )
    graph = repo.load()
    assert graph.vertex_count == 2
    assert graph.edge_count == 1


def test_load_is_cached_until_cleared(tmp_path):
    repo = write_graph(tmp_path, "vertex_id\n1\n", "id1,id2,weight:int\n")
    first = repo.load()
    assert repo.load() is first

    repo.clear_cache()
    assert repo.load() is not first


def test_missing_vertices_file(tmp_path):
    repo = CSVHostGraphRepository(HostGraphConfig(data_dir=tmp_path / "absent"))
    with pytest.raises(HostGraphError) as exc_info:
        repo.load()
    assert exc_info.value.file_path.endswith("vertices.csv")
    assert isinstance(exc_info.value.cause, OSError)


def test_edge_to_unknown_vertex(tmp_path):
    repo = write_graph(tmp_path, "vertex_id\n1\n", "id1,id2,weight:int\n1,4,2\n")
    with pytest.raises(HostGraphError) as exc_info:
        repo.load()
    assert exc_info.value.file_path.endswith("edges.csv")


def test_bad_weight_value(tmp_path):
    repo = write_graph(
        tmp_path, "vertex_id\n1\n2\n", "id1,id2,weight:int\n1,2,heavy\n"
    )
    with pytest.raises(HostGraphError) as exc_info:
        repo.load()
    assert isinstance(exc_info.value.cause, SchemaError)


def test_row_with_wrong_field_count(tmp_path):
    repo = write_graph(tmp_path, "vertex_id\n1\n2\n", "id1,id2,weight:int\n1,2\n")
    with pytest.raises(HostGraphError):
        repo.load()


def test_parse_edge_header():
    schema = parse_edge_header(["id1", "id2", "cost:double", " weight : int "])
    assert [(a.name, a.type) for a in schema.attributes] == [
        ("cost", AttributeType.DOUBLE),
        ("weight", AttributeType.INT),
    ]


@pytest.mark.parametrize(
    "header",
    [
        ["from", "to", "weight:int"],
        ["id1", "id2", "weight"],
        ["id1", "id2", ":int"],
    ],
)
def test_parse_edge_header_rejects_malformed(header):
    with pytest.raises(SchemaError):
        parse_edge_header(header)


def test_byte_order_mark_is_ignored(tmp_path):
    (tmp_path / "vertices.csv").write_text("vertex_id\n1\n2\n", encoding="utf-8-sig")
    (tmp_path / "edges.csv").write_text(
        "id1,id2,weight:int\n1,2,4\n", encoding="utf-8-sig"
    )
    graph = CSVHostGraphRepository(HostGraphConfig(data_dir=tmp_path)).load()

    assert [v.id for v in graph.vertices()] == [1, 2]
    assert graph.edge_count == 1


def test_missing_vertex_id_column(tmp_path):
    repo = write_graph(tmp_path, "id\n1\n2\n", "id1,id2,weight:int\n")
    with pytest.raises(HostGraphError) as exc_info:
        repo.load()
    assert exc_info.value.file_path.endswith("vertices.csv")
    assert "vertex_id" in exc_info.value.message
