"""PurgeDeletedPayments Use Case

Hard-deletes payments that have been soft-deleted for longer than the
retention window.
"""

import logging
import time
from datetime import datetime, timedelta
from libs.result import Result, Return, Error
from src.app.repositories.payment_repository import PaymentRepository
from src.app.services.unit_of_work import UnitOfWork
from .dtos import PurgeResultDTO

logger = logging.getLogger(__name__)


class PurgeDeletedPayments:
    def __init__(self, uow: UnitOfWork, payment_repo: PaymentRepository):
        self.uow = uow
        self.payment_repo = payment_repo

    async def execute(self, older_than_days: int = 30) -> Result[PurgeResultDTO]:
        start_time = time.time()
        cutoff = datetime.utcnow() - timedelta(days=older_than_days)

        try:
            purged = await self.payment_repo.purge_deleted_before(cutoff)
            await self.uow.commit()
        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Purging deleted payments failed: {e}")
            return Return.err(
                Error(
                    code="PURGE_PAYMENTS_FAILED",
                    message="Failed to purge deleted payments",
                    reason=str(e),
                )
            )

        execution_time_ms = int((time.time() - start_time) * 1000)
        logger.info(
            f"Purged {purged} payments deleted before {cutoff.isoformat()} in {execution_time_ms}ms"
        )
        return Return.ok(
            PurgeResultDTO(purged_count=purged, cutoff=cutoff, execution_time_ms=execution_time_ms)
        )
