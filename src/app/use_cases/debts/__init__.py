"""Debt bookkeeping use cases"""
from .create_debt import CreateDebt
from .list_cycles import ListDebtCycles, ListOpenCycles, ListPublicDebts
from .delete_debt import DeleteDebt, DeleteCycle
from .reconcile_cycle_totals import ReconcileCycleTotals
from .dtos import (
    CreateDebtCommandDTO,
    CreateDebtResponseDTO,
    DebtDTO,
    DebtCycleDTO,
    DebtCycleListDTO,
    PublicDebtDTO,
    PublicDebtListDTO,
    DeletedCycleDTO,
    CycleDiscrepancyDTO,
    CycleReconciliationResultDTO,
)

__all__ = [
    "CreateDebt",
    "ListDebtCycles",
    "ListOpenCycles",
    "ListPublicDebts",
    "DeleteDebt",
    "DeleteCycle",
    "ReconcileCycleTotals",
    "CreateDebtCommandDTO",
    "CreateDebtResponseDTO",
    "DebtDTO",
    "DebtCycleDTO",
    "DebtCycleListDTO",
    "PublicDebtDTO",
    "PublicDebtListDTO",
    "DeletedCycleDTO",
    "CycleDiscrepancyDTO",
    "CycleReconciliationResultDTO",
]
