import io

import pytest

from graphpath.adapters.host import CSVHostGraphRepository, InMemoryHostGraph
from graphpath.config import AppConfig, HostGraphConfig, QueryConfig
from graphpath.container import Container
from graphpath.ports.host_graph import HostGraphRepositoryPort
from graphpath.services import ShortestPathQuery


class FakeRepository:
    def __init__(self, graph):
        self.graph = graph
        self.loads = 0

    def load(self):
        self.loads += 1
        return self.graph


def test_resolve_unregistered_raises():
    container = Container(config=AppConfig())
    with pytest.raises(KeyError):
        container.resolve(HostGraphRepositoryPort)


def test_singleton_and_transient_registrations():
    container = Container(config=AppConfig())
    container.register(list, list)
    container.register(dict, dict, singleton=False)

    assert container.resolve(list) is container.resolve(list)
    assert container.resolve(dict) is not container.resolve(dict)



def test_register_replaces_cached_instance():
    container = Container(config=AppConfig())
    container.register(list, lambda: [1])
    first = container.resolve(list)

    container.register(list, lambda: [2])
    assert container.resolve(list) == [2]
    assert container.resolve(list) is not first


def test_create_default_wires_csv_repository(tmp_path):
    config = AppConfig(graph=HostGraphConfig(data_dir=tmp_path))
    container = Container.create_default(config)

    repository = container.resolve(HostGraphRepositoryPort)
    assert isinstance(repository, CSVHostGraphRepository)
    assert repository.config.data_dir == tmp_path


def test_query_uses_registered_repository():
    host = InMemoryHostGraph()
    for v in (1, 2):
        host.add_vertex(v)
    host.add_edge(1, 2)

    config = AppConfig(query=QueryConfig(echo_edges=False))
    container = Container.create_default(config)
    fake = FakeRepository(host)
    container.register(HostGraphRepositoryPort, lambda: fake)

    query = container.resolve(ShortestPathQuery)
    assert query.host is host
    assert query.config.echo_edges is False

    query.out = io.StringIO()
    result = query.execute(["1", "2"])
    assert result.path == (1, 2)
    assert result.distance == 0
