"""Background workers for the utang back office"""
from .cycle_reconciler import CycleReconcilerWorker
from .payment_purger import PaymentPurgeWorker

__all__ = ["CycleReconcilerWorker", "PaymentPurgeWorker"]
