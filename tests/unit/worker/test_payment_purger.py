"""Unit tests for PaymentPurgeWorker"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch
from datetime import datetime

from src.worker.payment_purger import PaymentPurgeWorker
from src.app.use_cases.payments import PurgeResultDTO


def _session_factory():
    mock_session = MagicMock()
    mock_session.__aenter__ = AsyncMock(return_value=mock_session)
    mock_session.__aexit__ = AsyncMock(return_value=False)
    return MagicMock(return_value=mock_session)


class TestPaymentPurgeWorkerInit:
    @patch("src.worker.payment_purger.ApplicationConfig")
    @patch("src.worker.payment_purger.create_async_engine")
    def test_retention_defaults_to_config(self, mock_create_engine, mock_app_config):
        mock_app_config.PAYMENT_PURGE_AFTER_DAYS = 30

        worker = PaymentPurgeWorker()

        assert worker.older_than_days == 30

    @patch("src.worker.payment_purger.ApplicationConfig")
    @patch("src.worker.payment_purger.create_async_engine")
    def test_retention_override(self, mock_create_engine, mock_app_config):
        mock_app_config.PAYMENT_PURGE_AFTER_DAYS = 30

        worker = PaymentPurgeWorker(older_than_days=0)

        assert worker.older_than_days == 0


@pytest.mark.asyncio
class TestPaymentPurgeWorkerRunOnce:
    @patch("src.worker.payment_purger.ApplicationConfig")
    @patch("src.worker.payment_purger.PurgeDeletedPayments")
    @patch("src.worker.payment_purger.SqlAlchemyUnitOfWork")
    @patch("src.worker.payment_purger.SqlAlchemyPaymentRepository")
    @patch("src.worker.payment_purger.create_async_engine")
    @patch("src.worker.payment_purger.sessionmaker")
    async def test_run_once_purges_with_retention(
        self,
        mock_sessionmaker,
        mock_create_engine,
        mock_payment_repo_class,
        mock_uow_class,
        mock_use_case_class,
        mock_app_config,
    ):
        """
        Given: Purge is enabled with a 14 day retention
        When: run_once is called
        Then: The use case runs with older_than_days=14
        """
        # Arrange
        mock_app_config.PAYMENT_PURGE_ENABLED = True
        mock_sessionmaker.return_value = _session_factory()

        purge_result = PurgeResultDTO(purged_count=4, cutoff=datetime.utcnow(), execution_time_ms=12)
        mock_result = MagicMock()
        mock_result.is_err.return_value = False
        mock_result.value = purge_result
        mock_use_case_class.return_value.execute = AsyncMock(return_value=mock_result)

        # Act
        result = await PaymentPurgeWorker(older_than_days=14).run_once()

        # Assert
        assert result.purged_count == 4
        mock_use_case_class.return_value.execute.assert_called_once_with(older_than_days=14)

    @patch("src.worker.payment_purger.ApplicationConfig")
    @patch("src.worker.payment_purger.create_async_engine")
    async def test_run_once_skips_when_disabled(self, mock_create_engine, mock_app_config):
        mock_app_config.PAYMENT_PURGE_ENABLED = False

        result = await PaymentPurgeWorker(older_than_days=30).run_once()

        assert result.purged_count == 0

    @patch("src.worker.payment_purger.ApplicationConfig")
    @patch("src.worker.payment_purger.PurgeDeletedPayments")
    @patch("src.worker.payment_purger.create_async_engine")
    @patch("src.worker.payment_purger.sessionmaker")
    async def test_run_once_raises_on_use_case_error(
        self, mock_sessionmaker, mock_create_engine, mock_use_case_class, mock_app_config
    ):
        mock_app_config.PAYMENT_PURGE_ENABLED = True
        mock_sessionmaker.return_value = _session_factory()
        mock_result = MagicMock()
        mock_result.is_err.return_value = True
        mock_result.error.message = "Failed to purge deleted payments"
        mock_use_case_class.return_value.execute = AsyncMock(return_value=mock_result)

        with pytest.raises(RuntimeError, match="Payment purge failed"):
            await PaymentPurgeWorker(older_than_days=30).run_once()

    @patch("src.worker.payment_purger.ApplicationConfig")
    @patch("src.worker.payment_purger.create_async_engine")
    async def test_shutdown_disposes_engine(self, mock_create_engine, mock_app_config):
        mock_engine = MagicMock()
        mock_engine.dispose = AsyncMock()
        mock_create_engine.return_value = mock_engine

        await PaymentPurgeWorker(older_than_days=30).shutdown()

        mock_engine.dispose.assert_called_once()
