"""Pydantic models for memstore."""

from memstore.models.entity import Entity, Product, User
from memstore.models.response import ApiResponse, example_responses
from memstore.models.todo import Todo

__all__ = [
    "ApiResponse",
    "Entity",
    "Product",
    "Todo",
    "User",
    "example_responses",
]
