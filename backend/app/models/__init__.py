"""Database model exports."""

from .allocation import Allocation, AllocationKind, Transaction, TransactionKind
from .client import Client, ClientStatus
from .insurance import Insurance
from .simulation import Simulation, SimulationStatus, SimulationVersion

__all__ = [
    "Client",
    "ClientStatus",
    "Simulation",
    "SimulationStatus",
    "SimulationVersion",
    "Allocation",
    "AllocationKind",
    "Transaction",
    "TransactionKind",
    "Insurance",
]
