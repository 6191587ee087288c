"""Cycle Reconciliation Background Worker

Periodically checks open debt cycle totals against their line items.
Can be run as a standalone script or integrated with a scheduler.
"""

import asyncio
import logging
from datetime import datetime
from typing import Optional
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.repositories.debt_cycle_repository import SqlAlchemyDebtCycleRepository
from src.adapter.repositories.debt_repository import SqlAlchemyDebtRepository
from src.app.use_cases.debts import ReconcileCycleTotals, CycleReconciliationResultDTO

logger = logging.getLogger(__name__)


class CycleReconcilerWorker:
    """
    Background worker for debt cycle reconciliation

    Features:
    - Compares open cycle totals against line item sums
    - Logs discrepancies for investigation
    - Can run once or continuously

    Usage:
        worker = CycleReconcilerWorker()
        result = await worker.run_once()

        await worker.run_forever(interval_seconds=86400)
    """

    def __init__(self, db_uri: Optional[str] = None):
        """
        Initialize the worker

        Args:
            db_uri: Database URI (defaults to ApplicationConfig.DB_URI)
        """
        self.db_uri = db_uri or ApplicationConfig.DB_URI

        self.engine = create_async_engine(self.db_uri, echo=False, future=True)
        self.async_session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )

        logger.info("CycleReconcilerWorker initialized")

    async def run_once(self) -> CycleReconciliationResultDTO:
        """
        Run reconciliation once

        Returns:
            CycleReconciliationResultDTO with reconciliation results
        """
        if not ApplicationConfig.RECONCILIATION_ENABLED:
            logger.info("Cycle reconciliation is disabled, skipping")
            return CycleReconciliationResultDTO(
                total_cycles_checked=0,
                discrepancies_found=0,
                discrepancies=[],
                reconciliation_time=datetime.utcnow(),
                execution_time_ms=0,
            )

        async with self.async_session_factory() as session:
            use_case = ReconcileCycleTotals(
                cycle_repo=SqlAlchemyDebtCycleRepository(session),
                debt_repo=SqlAlchemyDebtRepository(session),
            )
            result = await use_case.execute()

            if result.is_err():
                logger.error(f"Reconciliation failed: {result.error.message}")
                raise RuntimeError(f"Reconciliation failed: {result.error.message}")

            response = result.value
            if response.discrepancies_found > 0:
                logger.error(f"ALERT: {response.discrepancies_found} cycle discrepancies found!")
                for d in response.discrepancies:
                    logger.error(
                        f"  - Cycle {d.cycle_id} (customer {d.customer_id}): "
                        f"total={d.recorded_total}, line_items={d.line_item_total}, "
                        f"diff={d.difference}"
                    )

            return response

    async def run_forever(self, interval_seconds: int = 86400):
        """
        Run reconciliation continuously at specified interval

        Args:
            interval_seconds: Seconds between runs (default: 24 hours)
        """
        logger.info(f"Starting continuous cycle reconciliation with {interval_seconds}s interval")

        while True:
            try:
                result = await self.run_once()
                logger.info(
                    f"Reconciliation run complete. Checked {result.total_cycles_checked} cycles, "
                    f"found {result.discrepancies_found} discrepancies "
                    f"in {result.execution_time_ms}ms"
                )
            except Exception as e:
                logger.error(f"Reconciliation run failed: {e}")

            await asyncio.sleep(interval_seconds)

    async def shutdown(self):
        """Cleanup resources"""
        await self.engine.dispose()
        logger.info("CycleReconcilerWorker shutdown complete")


async def main():
    """
    Entry point for running the worker as a standalone script

    Usage:
        python -m src.worker.cycle_reconciler --once
        python -m src.worker.cycle_reconciler --interval 3600
    """
    import argparse

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Debt Cycle Reconciliation Worker")
    parser.add_argument("--once", action="store_true", help="Run once and exit")
    parser.add_argument(
        "--interval", type=int, default=ApplicationConfig.RECONCILIATION_INTERVAL_SECONDS,
        help="Interval between runs in seconds (default: 86400 = 24 hours)"
    )
    args = parser.parse_args()

    worker = CycleReconcilerWorker()

    try:
        if args.once:
            result = await worker.run_once()
            print("Reconciliation complete:")
            print(f"  Open cycles checked: {result.total_cycles_checked}")
            print(f"  Discrepancies found: {result.discrepancies_found}")
            print(f"  Execution time: {result.execution_time_ms}ms")
        else:
            await worker.run_forever(interval_seconds=args.interval)
    except KeyboardInterrupt:
        logger.info("Received shutdown signal")
    finally:
        await worker.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
