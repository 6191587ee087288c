"""Deleted Payment Purge Background Worker

Hard-deletes payments soft-deleted longer ago than the retention window
(PAYMENT_PURGE_AFTER_DAYS). Meant to run daily.
"""

import asyncio
import logging
from datetime import datetime
from typing import Optional
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.repositories.payment_repository import SqlAlchemyPaymentRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.payments import PurgeDeletedPayments, PurgeResultDTO

logger = logging.getLogger(__name__)


class PaymentPurgeWorker:
    """
    Background worker removing old soft-deleted payments

    Usage:
        worker = PaymentPurgeWorker()
        result = await worker.run_once()

        await worker.run_forever(interval_seconds=86400)
    """

    def __init__(self, db_uri: Optional[str] = None, older_than_days: Optional[int] = None):
        """
        Args:
            db_uri: Database URI (defaults to ApplicationConfig.DB_URI)
            older_than_days: Retention window (defaults to PAYMENT_PURGE_AFTER_DAYS)
        """
        self.db_uri = db_uri or ApplicationConfig.DB_URI
        self.older_than_days = (
            older_than_days
            if older_than_days is not None
            else ApplicationConfig.PAYMENT_PURGE_AFTER_DAYS
        )

        self.engine = create_async_engine(self.db_uri, echo=False, future=True)
        self.async_session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )

        logger.info(f"PaymentPurgeWorker initialized (retention={self.older_than_days} days)")

    async def run_once(self) -> PurgeResultDTO:
        if not ApplicationConfig.PAYMENT_PURGE_ENABLED:
            logger.info("Payment purge is disabled, skipping")
            return PurgeResultDTO(purged_count=0, cutoff=datetime.utcnow(), execution_time_ms=0)

        async with self.async_session_factory() as session:
            use_case = PurgeDeletedPayments(
                uow=SqlAlchemyUnitOfWork(session),
                payment_repo=SqlAlchemyPaymentRepository(session),
            )
            result = await use_case.execute(older_than_days=self.older_than_days)

            if result.is_err():
                logger.error(f"Payment purge failed: {result.error.message}")
                raise RuntimeError(f"Payment purge failed: {result.error.message}")

            return result.value

    async def run_forever(self, interval_seconds: int = 86400):
        logger.info(f"Starting payment purge loop with {interval_seconds}s interval")

        while True:
            try:
                result = await self.run_once()
                logger.info(
                    f"Purge run complete. Removed {result.purged_count} payments "
                    f"deleted before {result.cutoff.isoformat()}"
                )
            except Exception as e:
                logger.error(f"Purge run failed: {e}")

            await asyncio.sleep(interval_seconds)

    async def shutdown(self):
        """Cleanup resources"""
        await self.engine.dispose()
        logger.info("PaymentPurgeWorker shutdown complete")


async def main():
    """
    Entry point for running the worker as a standalone script

    Usage:
        python -m src.worker.payment_purger --once
        python -m src.worker.payment_purger --interval 86400 --days 30
    """
    import argparse

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Deleted Payment Purge Worker")
    parser.add_argument("--once", action="store_true", help="Run once and exit")
    parser.add_argument(
        "--interval", type=int, default=ApplicationConfig.PAYMENT_PURGE_INTERVAL_SECONDS,
        help="Interval between runs in seconds (default: 86400 = 24 hours)"
    )
    parser.add_argument(
        "--days", type=int, default=None,
        help="Purge payments deleted more than this many days ago"
    )
    args = parser.parse_args()

    worker = PaymentPurgeWorker(older_than_days=args.days)

    try:
        if args.once:
            result = await worker.run_once()
            print(f"Purged {result.purged_count} payments deleted before {result.cutoff.isoformat()}")
        else:
            await worker.run_forever(interval_seconds=args.interval)
    except KeyboardInterrupt:
        logger.info("Received shutdown signal")
    finally:
        await worker.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
