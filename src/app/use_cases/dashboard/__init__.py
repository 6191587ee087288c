"""Dashboard use cases"""
from .get_dashboard import GetDashboardCards, CompareTotals, GetDailyPaymentTrends
from .dtos import DashboardCardsDTO, CompareTotalsDTO, DailyPaymentDTO, DailyPaymentTrendsDTO

__all__ = [
    "GetDashboardCards",
    "CompareTotals",
    "GetDailyPaymentTrends",
    "DashboardCardsDTO",
    "CompareTotalsDTO",
    "DailyPaymentDTO",
    "DailyPaymentTrendsDTO",
]
