"""ReconcileCycleTotals Use Case

Checks that every open cycle's total equals the sum of its line items.
"""

import logging
import time
from datetime import datetime
from libs.result import Result, Return, Error
from src.app.repositories.debt_cycle_repository import DebtCycleRepository
from src.app.repositories.debt_repository import DebtRepository
from .dtos import CycleDiscrepancyDTO, CycleReconciliationResultDTO

logger = logging.getLogger(__name__)


class ReconcileCycleTotals:
    """
    Use Case: Reconcile open cycle totals against their line items

    Business Rules:
    1. Only open cycles are checked; a settled cycle's total is frozen
    2. Discrepancies are reported and logged, never corrected
    """

    def __init__(self, cycle_repo: DebtCycleRepository, debt_repo: DebtRepository):
        self.cycle_repo = cycle_repo
        self.debt_repo = debt_repo

    async def execute(self) -> Result[CycleReconciliationResultDTO]:
        start_time = time.time()
        reconciliation_time = datetime.utcnow()

        try:
            cycles = await self.cycle_repo.list_open()
            logger.info(f"Reconciling {len(cycles)} open cycles")

            discrepancies: list[CycleDiscrepancyDTO] = []
            for cycle in cycles:
                line_item_total = await self.debt_repo.sum_by_cycle(cycle.id)
                if cycle.total != line_item_total:
                    discrepancy = CycleDiscrepancyDTO(
                        cycle_id=cycle.id,
                        customer_id=cycle.customer_id,
                        recorded_total=cycle.total,
                        line_item_total=line_item_total,
                        difference=cycle.total - line_item_total,
                    )
                    discrepancies.append(discrepancy)
                    logger.warning(
                        f"Cycle {cycle.id} (customer {cycle.customer_id}): "
                        f"total={cycle.total}, line_items={line_item_total}"
                    )

            execution_time_ms = int((time.time() - start_time) * 1000)
            if discrepancies:
                logger.warning(
                    f"Reconciliation complete. Found {len(discrepancies)} discrepancies "
                    f"out of {len(cycles)} cycles in {execution_time_ms}ms"
                )
            else:
                logger.info(
                    f"Reconciliation complete. All {len(cycles)} cycles balanced "
                    f"in {execution_time_ms}ms"
                )

            return Return.ok(
                CycleReconciliationResultDTO(
                    total_cycles_checked=len(cycles),
                    discrepancies_found=len(discrepancies),
                    discrepancies=discrepancies,
                    reconciliation_time=reconciliation_time,
                    execution_time_ms=execution_time_ms,
                )
            )

        except Exception as e:
            logger.error(f"Cycle reconciliation failed: {e}")
            return Return.err(
                Error(
                    code="RECONCILIATION_FAILED",
                    message="Failed to reconcile debt cycles",
                    reason=str(e),
                )
            )
