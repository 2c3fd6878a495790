# clientdesk/services/base_service.py
"""
BaseCRUDService: Generic in-memory repository for standard CRUD operations.
Each domain service owns one collection and adds its scoped queries on top.
"""
import logging
from typing import Any, Callable, Dict, Generic, Iterable, List, Mapping, Optional, Type, TypeVar

import pydantic

from ..core.exceptions import NotFoundError, ValidationError
from ..utils.clock import utcnow
from .identity import IdPolicy, MonotonicIdPolicy
from .latency import LatencyPolicy, NoLatency

logger = logging.getLogger(__name__)

# Generic type for SQLModel models
ModelType = TypeVar("ModelType")


def to_int(value: Any) -> Optional[int]:
    """Ids arrive as ints or numeric strings; anything else matches nothing."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class BaseCRUDService(Generic[ModelType]):
    """
    Base class providing generic CRUD (Create, Read, Update, Delete) operations
    over a list held in memory.

    Usage:
        class MyService(BaseCRUDService[MyModel]):
            def __init__(self, records=(), latency=None, id_policy=None):
                super().__init__(MyModel, records, latency, id_policy)

    Every operation awaits the latency policy first and then works on the
    list without further awaits, so a mutation is never seen half-applied.
    """

    resource_name = "Record"

    # Simulated delay per operation, in milliseconds
    delays: Dict[str, int] = {
        "get_all": 250,
        "get_by_id": 200,
        "create": 400,
        "update": 350,
        "delete": 250,
        "query": 200,
    }

    def __init__(
        self,
        model: Type[ModelType],
        records: Iterable[Any] = (),
        latency: Optional[LatencyPolicy] = None,
        id_policy: Optional[IdPolicy] = None,
    ):
        """
        Initialize the service with its model class and seed records.

        Args:
            model: The SQLModel class this service manages.
            records: Seed records (dicts or model instances); copied, never shared.
            latency: Delay policy awaited before each operation.
            id_policy: Strategy handing out ids on create.
        """
        self.model = model
        self.latency = latency or NoLatency()
        self.id_policy = id_policy or MonotonicIdPolicy()
        self._records: List[ModelType] = [self._build(self._as_dict(r)) for r in records]
        self.id_policy.observe(r.id for r in self._records if r.id is not None)

    def __len__(self) -> int:
        return len(self._records)

    # --- Helpers ---

    @staticmethod
    def _as_dict(data: Any, exclude_unset: bool = False) -> Dict[str, Any]:
        if isinstance(data, pydantic.BaseModel):
            return data.model_dump(exclude_unset=exclude_unset)
        return dict(data)

    def _build(self, data: Dict[str, Any]) -> ModelType:
        try:
            return self.model.model_validate(data)
        except pydantic.ValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise ValidationError(f"Invalid {self.resource_name.lower()} data: {details}") from e

    @staticmethod
    def _copy(record: ModelType) -> ModelType:
        return record.model_copy(deep=True)

    def _has_field(self, name: str) -> bool:
        return name in self.model.model_fields

    def _not_found(self) -> NotFoundError:
        return NotFoundError(f"{self.resource_name} not found")

    def _find_index(self, id: Any) -> int:
        numeric_id = to_int(id)
        for index, record in enumerate(self._records):
            if numeric_id is not None and record.id == numeric_id:
                return index
        logger.warning(f"{self.resource_name} {id} not found")
        raise self._not_found()

    def _filter(self, predicate: Callable[[ModelType], bool]) -> List[ModelType]:
        return [self._copy(r) for r in self._records if predicate(r)]

    async def _wait(self, operation: str) -> None:
        await self.latency.wait(operation, self.delays.get(operation, self.delays["query"]))

    # --- Hooks for domain services ---

    def _before_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Checks and defaults specific to an entity. Runs before validation."""
        return data

    # --- CRUD ---

    async def get_all(self) -> List[ModelType]:
        """Retrieve every record, in insertion order."""
        await self._wait("get_all")
        return [self._copy(r) for r in self._records]

    async def get_by_id(self, id: Any) -> ModelType:
        """
        Retrieve a single record by its id.

        Raises:
            NotFoundError: if no record has that id.
        """
        await self._wait("get_by_id")
        return self._copy(self._records[self._find_index(id)])

    async def create(self, data: Mapping[str, Any]) -> ModelType:
        """
        Create a new record.

        Args:
            data: Field values. Any `id` given is ignored; None values fall
                back to the model defaults.

        Returns:
            A copy of the stored record.
        """
        await self._wait("create")
        values = {k: v for k, v in self._as_dict(data).items() if v is not None and k != "id"}
        values = self._before_create(values)

        now = utcnow()
        for stamp in ("created_at", "updated_at"):
            if self._has_field(stamp):
                values[stamp] = now
        values["id"] = self.id_policy.next_id(r.id for r in self._records if r.id is not None)

        record = self._build(values)
        self._records.append(record)
        logger.info(f"{self.resource_name} {record.id} created")
        return self._copy(record)

    async def update(self, id: Any, data: Mapping[str, Any]) -> ModelType:
        """
        Shallow-merge `data` over an existing record.

        The id can never change and updated_at is refreshed when the entity
        has one. The merged record is validated before it replaces the old one.

        Raises:
            NotFoundError: if no record has that id.
            ValidationError: if the merged record is invalid.
        """
        await self._wait("update")
        index = self._find_index(id)
        current = self._records[index]

        merged = {**current.model_dump(), **self._as_dict(data, exclude_unset=True), "id": current.id}
        if self._has_field("updated_at"):
            merged["updated_at"] = utcnow()

        record = self._build(merged)
        self._records[index] = record
        logger.info(f"{self.resource_name} {record.id} updated")
        return self._copy(record)

    async def delete(self, id: Any) -> ModelType:
        """
        Delete a record by its id and return it.

        Raises:
            NotFoundError: if no record has that id.
        """
        await self._wait("delete")
        record = self._records.pop(self._find_index(id))
        logger.info(f"{self.resource_name} {record.id} deleted")
        return record
