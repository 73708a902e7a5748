"""
Entity-Component-System Core
=============================
Integer entity ids with one component store per component type.

Destruction is deferred: a destroyed entity is hidden from every later
query in the same frame and compacted away once per frame by
process_dead_entities(). Systems can therefore destroy and spawn
entities while iterating a query.
"""

from typing import Dict, Set, Type, TypeVar, Optional, Iterator, Tuple, Any


C = TypeVar('C')


class World:
    """
    Owns every entity of a game session.

    Queries yield entities in creation order, so a seeded run replays
    identically.
    """

    def __init__(self):
        self._next_entity_id: int = 0
        self._entities: Set[int] = set()
        self._components: Dict[Type, Dict[int, Any]] = {}
        self._dead_entities: Set[int] = set()

    def create_entity(self, *components: Any) -> int:
        """Create a new entity, optionally with its components, and return its id."""
        entity_id = self._next_entity_id
        self._next_entity_id += 1
        self._entities.add(entity_id)
        for component in components:
            self.add_component(entity_id, component)
        return entity_id

    def destroy_entity(self, entity_id: int) -> None:
        """Mark an entity for destruction (compacted at end of frame)."""
        if entity_id in self._entities:
            self._dead_entities.add(entity_id)

    def process_dead_entities(self) -> int:
        """Remove all entities marked for destruction. Returns how many went."""
        removed = 0
        for entity_id in self._dead_entities:
            if entity_id in self._entities:
                self._entities.remove(entity_id)
                for component_store in self._components.values():
                    component_store.pop(entity_id, None)
                removed += 1
        self._dead_entities.clear()
        return removed

    def add_component(self, entity_id: int, component: Any) -> None:
        """Add a component to an entity, replacing one of the same type."""
        self._components.setdefault(type(component), {})[entity_id] = component

    def get_component(self, entity_id: int, component_type: Type[C]) -> Optional[C]:
        """Get a component for an entity, or None if not found."""
        store = self._components.get(component_type)
        if store is None:
            return None
        return store.get(entity_id)

    def query(self, *component_types: Type) -> Iterator[Tuple[Any, ...]]:
        """
        Query for all live entities that have ALL specified component types.

        Yields tuples of (entity_id, component1, component2, ...). The
        candidate set is fixed when iteration starts: entities created
        during iteration are not visited, entities destroyed during
        iteration are skipped.
        """
        if not component_types:
            return

        stores = []
        for component_type in component_types:
            store = self._components.get(component_type)
            if not store:
                return
            stores.append(store)

        candidates = set(stores[0])
        for store in stores[1:]:
            candidates &= store.keys()

        for entity_id in sorted(candidates):
            if entity_id in self._dead_entities:
                continue
            # Components removed mid-iteration drop the entity
            if any(entity_id not in store for store in stores):
                continue
            yield (entity_id,) + tuple(store[entity_id] for store in stores)

    def count(self, *component_types: Type) -> int:
        """Number of live entities having all the given components."""
        return sum(1 for _ in self.query(*component_types))

    def entity_count(self) -> int:
        """Return the number of live entities."""
        return len(self._entities) - len(self._dead_entities)

    def is_alive(self, entity_id: int) -> bool:
        """Check if an entity exists and is not marked for death."""
        return entity_id in self._entities and entity_id not in self._dead_entities
