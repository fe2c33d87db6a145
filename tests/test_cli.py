"""End-to-end tests for the graphpath command."""

import pytest

from graphpath.cli import main
from graphpath.config import reset_config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    for name in ("GRAPHPATH_GRAPH_DATA_DIR", "GRAPHPATH_QUERY_ECHO_EDGES"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "vertices.csv").write_text(
        "vertex_id\n1\n2\n3\n4\n5\n", encoding="utf-8"
    )
    (tmp_path / "edges.csv").write_text(
        "id1,id2,weight:int\n1,2,1\n1,3,4\n2,3,2\n3,4,1\n",
        encoding="utf-8",
    )
    return tmp_path


def test_prints_distance_and_path(data_dir, capsys):
    assert main(["--data-dir", str(data_dir), "1", "4"]) == 0
    out = capsys.readouterr().out.splitlines()

    assert out[0] == "Source vertex: 1, Destination vertex: 4"
    assert "Edge found between: 2 and 3" in out
    assert "Edge weight = 2" in out
    assert out[-2] == "Shortest dist to destination: 4"
    assert out[-1].split() == ["Shortest", "Path:", "1", "2", "3", "4"]


def test_quiet_edges(data_dir, capsys):
    main(["--data-dir", str(data_dir), "--quiet-edges", "1", "3"])
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Source vertex: 1, Destination vertex: 3",
        "Shortest dist to destination: 3",
        "Shortest Path: 1  2  3  ",
    ]


def test_unreachable(data_dir, capsys):
    assert main(["--data-dir", str(data_dir), "--quiet-edges", "1", "5"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "no path"


def test_missing_vertex_id(data_dir, capsys):
    assert main(["--data-dir", str(data_dir), "1"]) == 0
    assert capsys.readouterr().out == "Missing vertex id\n"


def test_unknown_vertex(data_dir, capsys):
    assert main(["--data-dir", str(data_dir), "1", "99"]) == 0
    assert capsys.readouterr().out == "Vertices do not exist in the current graph\n"


def test_missing_data_files(tmp_path, capsys):
    assert main(["--data-dir", str(tmp_path / "nowhere"), "1", "2"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error:" in captured.err


def test_bad_log_level(data_dir, capsys):
    assert main(["--data-dir", str(data_dir), "--log-level", "loud", "1", "2"]) == 1
    assert "Unknown log level" in capsys.readouterr().err
