from boxoffice.handlers.views import (
    CustomerCompactView,
    CustomerDetailView,
    CustomerListView,
    EventDetailView,
    EventListView,
    EventPlanView,
    EventQuoteView,
    EventReportView,
    EventSaleView,
    RowContiguousView,
    RowFreeSeatsView,
    SaleDetailView,
    SaleListView,
)

__all__ = [
    "CustomerCompactView",
    "CustomerDetailView",
    "CustomerListView",
    "EventDetailView",
    "EventListView",
    "EventPlanView",
    "EventQuoteView",
    "EventReportView",
    "EventSaleView",
    "RowContiguousView",
    "RowFreeSeatsView",
    "SaleDetailView",
    "SaleListView",
]
