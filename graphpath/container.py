"""Wiring for the command-line front-end.

Binds the host graph repository and the query service, and lets tests
swap the repository for a fake.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Maps a port type to the factory that builds it.

    Usage:
        container = Container.create_default()
        query = container.resolve(ShortestPathQuery)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _instances: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _shared: set[type[Any]] = field(default_factory=set, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Bind ``port_type`` to ``factory``, dropping any cached instance."""
        self._factories[port_type] = factory
        self._instances.pop(port_type, None)
        if singleton:
            self._shared.add(port_type)
        else:
            self._shared.discard(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Build (or return the cached) instance bound to ``port_type``.

        Raises:
            KeyError: If the type is not registered.
        """
        if port_type not in self._factories:
            raise KeyError(f"Type not registered: {port_type}")
        if port_type not in self._shared:
            return self._factories[port_type]()
        if port_type not in self._instances:
            self._instances[port_type] = self._factories[port_type]()
        return self._instances[port_type]

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Bind the CSV repository from ``config.graph`` and the query service.

        The query service is built per resolve so each query sees the
        repository's current graph.
        """
        from .adapters.host import CSVHostGraphRepository
        from .ports.host_graph import HostGraphRepositoryPort
        from .services import ShortestPathQuery

        config = config or get_config()
        container = cls(config=config)
        container.register(
            HostGraphRepositoryPort,
            lambda: CSVHostGraphRepository(config.graph),
        )

        def create_query() -> ShortestPathQuery:
            repository = container.resolve(HostGraphRepositoryPort)
            return ShortestPathQuery(host=repository.load(), config=config.query)

        container.register(ShortestPathQuery, create_query, singleton=False)
        return container
