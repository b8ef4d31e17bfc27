"""Application ports package."""

from .bill_source import BillSourcePort
from .database import DatabaseEnginePort
from .goals_repository import GoalsRepositoryPort
from .transaction_store import TransactionStorePort

__all__ = [
    "BillSourcePort",
    "DatabaseEnginePort",
    "GoalsRepositoryPort",
    "TransactionStorePort",
]
