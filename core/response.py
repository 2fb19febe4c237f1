from typing import Any, Dict, Generic, List, Sequence, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    success: bool = True
    data: T


class ListEnvelope(BaseModel, Generic[T]):
    success: bool = True
    count: int
    data: List[T]


class EmptyEnvelope(BaseModel):
    success: bool = True
    data: Dict[str, Any] = {}


def ok(data: Any) -> Dict[str, Any]:
    return {"success": True, "data": data}


def ok_list(rows: Sequence[Any]) -> Dict[str, Any]:
    return {"success": True, "count": len(rows), "data": list(rows)}


def ok_empty() -> Dict[str, Any]:
    return {"success": True, "data": {}}
