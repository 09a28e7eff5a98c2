from django.urls import path

from boxoffice.handlers import (
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

urlpatterns = [
    path("customers", CustomerListView.as_view(), name="customer-list"),
    path("customers/compact", CustomerCompactView.as_view(), name="customer-compact"),
    path("customers/<int:customer_id>", CustomerDetailView.as_view(), name="customer-detail"),
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<int:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("events/<int:event_id>/plan", EventPlanView.as_view(), name="event-plan"),
    path("events/<int:event_id>/report", EventReportView.as_view(), name="event-report"),
    path("events/<int:event_id>/quote", EventQuoteView.as_view(), name="event-quote"),
    path("events/<int:event_id>/sales", EventSaleView.as_view(), name="event-sales"),
    path(
        "events/<int:event_id>/rows/<str:row>/free",
        RowFreeSeatsView.as_view(),
        name="row-free-seats",
    ),
    path(
        "events/<int:event_id>/rows/<str:row>/contiguous",
        RowContiguousView.as_view(),
        name="row-contiguous",
    ),
    path("sales", SaleListView.as_view(), name="sale-list"),
    path("sales/<int:transaction_id>", SaleDetailView.as_view(), name="sale-detail"),
]
