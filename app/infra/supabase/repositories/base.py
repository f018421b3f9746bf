"""Base repository with common CRUD operations"""
import logging
from typing import Generic, TypeVar, Type, Optional, List, Dict, Any
from uuid import UUID

from pydantic import BaseModel
from supabase import Client

from app.services.errors import StoreFailure

T = TypeVar('T', bound=BaseModel)
CreateT = TypeVar('CreateT', bound=BaseModel)
UpdateT = TypeVar('UpdateT', bound=BaseModel)

logger = logging.getLogger(__name__)


class BaseRepository(Generic[T, CreateT, UpdateT]):
    """
    Base repository providing common database operations.
    Hides Supabase implementation details from the rest of the application.

    Every collaborator error is re-raised as StoreFailure carrying the
    underlying message.
    """
    
    def __init__(self, client: Client, table_name: str, model_class: Type[T]):
        self._client = client
        self._table_name = table_name
        self._model_class = model_class
    
    def _to_model(self, data: Dict[str, Any]) -> T:
        """Convert database dict to domain model"""
        return self._model_class(**data)
    
    def _to_models(self, data: List[Dict[str, Any]]) -> List[T]:
        """Convert list of database dicts to domain models"""
        return [self._to_model(item) for item in data]

    def _execute(self, query, action: str) -> List[Dict[str, Any]]:
        """Run a query builder and return its rows"""
        try:
            response = query.execute()
        except Exception as e:
            logger.error(f"Failed to {action} in {self._table_name}: {e}")
            raise StoreFailure(str(e)) from e
        return response.data or []
    
    async def find_by_id(self, id: UUID) -> Optional[T]:
        """Find a single record by ID"""
        query = self._client.table(self._table_name).select("*").eq("id", str(id))
        rows = self._execute(query, "find record")
        
        if not rows:
            return None
        
        return self._to_model(rows[0])
    
    async def find_by_filters(
        self,
        filters: Dict[str, Any],
        order_by: Optional[str] = None,
        desc: bool = False,
    ) -> List[T]:
        """Find records matching all equality filters"""
        query = self._client.table(self._table_name).select("*")
        
        for key, value in filters.items():
            query = query.eq(key, value)
        
        if order_by:
            query = query.order(order_by, desc=desc)
        
        return self._to_models(self._execute(query, "query records"))
    
    async def create(self, data: CreateT, **extra: Any) -> T:
        """Create a new record"""
        data_dict = data.model_dump(mode='json')
        data_dict.update(extra)
        query = self._client.table(self._table_name).insert(data_dict)
        rows = self._execute(query, "create record")
        
        if not rows:
            raise StoreFailure("Failed to create record")
        
        return self._to_model(rows[0])
    
    async def update(self, id: UUID, data: UpdateT, **extra: Any) -> Optional[T]:
        """Update a record by ID, writing only the fields explicitly set on data"""
        data_dict = data.model_dump(exclude_unset=True, mode='json')
        data_dict.update(extra)
        
        if not data_dict:
            # No fields to update
            return await self.find_by_id(id)
        
        query = self._client.table(self._table_name).update(data_dict).eq("id", str(id))
        rows = self._execute(query, "update record")
        
        if not rows:
            return None
        
        return self._to_model(rows[0])
    
    async def delete(self, id: UUID) -> bool:
        """Delete a record by ID"""
        query = self._client.table(self._table_name).delete().eq("id", str(id))
        return len(self._execute(query, "delete record")) > 0
