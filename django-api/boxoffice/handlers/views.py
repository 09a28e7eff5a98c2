"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.apps import apps
from django.http import HttpResponse
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from boxoffice.domain.errors import ConsistencyError, DomainError, NotFoundError, ValidationError
from boxoffice.handlers.serializers import (
    CustomerCreateSerializer,
    CustomerSerializer,
    CustomerUpdateSerializer,
    EventCreateSerializer,
    EventSerializer,
    EventUpdateSerializer,
    SaleCreateSerializer,
    TransactionSerializer,
)
from boxoffice.services import seat_selection
from boxoffice.services.booking_service import BookingService
from boxoffice.services.plan_renderer import NOT_FOUND_MESSAGE, PlanRenderer
from boxoffice.services.seat_finder import find_contiguous

logger = logging.getLogger(__name__)

_ERROR_STATUS = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConsistencyError, status.HTTP_409_CONFLICT),
)


def error_response(error: DomainError) -> Response:
    """Map a domain error to its HTTP status with a user-safe body."""
    http_status = next(
        (code for kind, code in _ERROR_STATUS if isinstance(error, kind)),
        status.HTTP_400_BAD_REQUEST,
    )
    if isinstance(error, ConsistencyError):
        logger.error("Sale rejected after rollback: %s", error)
    body = {"code": error.code.value, "message": error.message}
    seat_id = getattr(error, "seat_id", None)
    if seat_id is not None:
        body["seat_id"] = seat_id
    return Response(body, status=http_status)


def not_found(message: str) -> Response:
    return Response({"code": "NOT_FOUND", "message": message}, status=status.HTTP_404_NOT_FOUND)


def text_response(text: str, http_status: int = status.HTTP_200_OK) -> HttpResponse:
    return HttpResponse(text, content_type="text/plain; charset=utf-8", status=http_status)


def row_index(letter: str) -> int:
    """0-based row for a row letter; -1 when the text is not a single letter."""
    if len(letter) != 1 or not "A" <= letter.upper() <= "Z":
        return -1
    return ord(letter.upper()) - ord("A")


class BookingView(APIView):
    """Base view with access to the process-wide booking service."""

    @property
    def booking(self) -> BookingService:
        return apps.get_app_config("boxoffice").booking

    def context(self) -> dict:
        return {"booking": self.booking}


class CustomerListView(BookingView):
    """Handler for GET/POST /api/customers"""

    def get(self, request: Request) -> Response:
        return Response(CustomerSerializer(self.booking.list_customers(), many=True).data)

    def post(self, request: Request) -> Response:
        serializer = CustomerCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            customer = self.booking.register_customer(**serializer.validated_data)
        except DomainError as exc:
            return error_response(exc)
        return Response(CustomerSerializer(customer).data, status=status.HTTP_201_CREATED)


class CustomerDetailView(BookingView):
    """Handler for GET/PATCH/DELETE /api/customers/{customer_id}"""

    def get(self, request: Request, customer_id: int) -> Response:
        customer = self.booking.get_customer(customer_id)
        if customer is None:
            return not_found("Customer not found")
        return Response(CustomerSerializer(customer).data)

    def patch(self, request: Request, customer_id: int) -> Response:
        serializer = CustomerUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        if not self.booking.update_customer(customer_id, **serializer.validated_data):
            return not_found("Customer not found")
        return Response(CustomerSerializer(self.booking.get_customer(customer_id)).data)

    def delete(self, request: Request, customer_id: int) -> Response:
        if not self.booking.retire_customer(customer_id):
            return not_found("Customer not found")
        return Response(status=status.HTTP_204_NO_CONTENT)


class CustomerCompactView(BookingView):
    """Handler for POST /api/customers/compact"""

    def post(self, request: Request) -> Response:
        self.booking.compact_customers()
        return Response(status=status.HTTP_204_NO_CONTENT)


class EventListView(BookingView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        events = self.booking.list_events()
        return Response(EventSerializer(events, many=True, context=self.context()).data)

    def post(self, request: Request) -> Response:
        serializer = EventCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            event = self.booking.create_event(**serializer.validated_data)
        except DomainError as exc:
            return error_response(exc)
        return Response(
            EventSerializer(event, context=self.context()).data, status=status.HTTP_201_CREATED
        )


class EventDetailView(BookingView):
    """Handler for GET/PATCH/DELETE /api/events/{event_id}"""

    def get(self, request: Request, event_id: int) -> Response:
        event = self.booking.get_event(event_id)
        if event is None:
            return not_found("Event not found")
        return Response(EventSerializer(event, context=self.context()).data)

    def patch(self, request: Request, event_id: int) -> Response:
        serializer = EventUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        try:
            found = self.booking.get_event(event_id) is not None
            if found and "base_price" in data:
                found = self.booking.set_event_price(event_id, data["base_price"])
            if found:
                found = self.booking.rename_event(event_id, data.get("name"))
        except DomainError as exc:
            return error_response(exc)
        if not found:
            return not_found("Event not found")
        return self.get(request, event_id)

    def delete(self, request: Request, event_id: int) -> Response:
        if self.booking.get_event(event_id) is None:
            return not_found("Event not found")
        if not self.booking.delete_event_if_no_sales(event_id):
            return Response(
                {"code": "EVENT_HAS_SALES", "message": "Event has sales and cannot be deleted"},
                status=status.HTTP_409_CONFLICT,
            )
        return Response(status=status.HTTP_204_NO_CONTENT)


class EventPlanView(BookingView):
    """Handler for GET /api/events/{event_id}/plan?view=occupancy|ids&colors=0|1"""

    def get(self, request: Request, event_id: int) -> HttpResponse:
        renderer = PlanRenderer(self.booking)
        if request.query_params.get("view", "occupancy") == "ids":
            text = renderer.id_map_view(event_id)
        else:
            use_colors = request.query_params.get("colors") in ("1", "true")
            text = renderer.occupancy_view(event_id, use_colors=use_colors)
        if text == NOT_FOUND_MESSAGE:
            return text_response(text, status.HTTP_404_NOT_FOUND)
        return text_response(text)


class EventReportView(BookingView):
    """Handler for GET /api/events/{event_id}/report"""

    def get(self, request: Request, event_id: int) -> HttpResponse:
        text = PlanRenderer(self.booking).report(event_id)
        if text == NOT_FOUND_MESSAGE:
            return text_response(text, status.HTTP_404_NOT_FOUND)
        return text_response(text)


class EventQuoteView(BookingView):
    """Handler for GET /api/events/{event_id}/quote?customer_id=&seats="""

    def get(self, request: Request, event_id: int) -> Response:
        try:
            customer_id = int(request.query_params["customer_id"])
            seat_count = int(request.query_params["seats"])
        except (KeyError, ValueError):
            return Response(
                {"code": "INVALID_QUERY", "message": "customer_id and seats must be integers"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        if seat_count < 1:
            return Response(
                {"code": "INVALID_QUANTITY", "message": "seats must be at least 1"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        try:
            quote = self.booking.quote(event_id, customer_id, seat_count)
        except DomainError as exc:
            return error_response(exc)
        return Response(
            {
                "seats": seat_count,
                "gross": str(quote.gross),
                "discount": str(quote.discount),
                "net": str(quote.net),
            }
        )


class RowFreeSeatsView(BookingView):
    """Handler for GET /api/events/{event_id}/rows/{row}/free"""

    def get(self, request: Request, event_id: int, row: str) -> Response:
        event = self.booking.get_event(event_id)
        if event is None:
            return not_found("Event not found")
        seat_ids = self.booking.free_seats_in_row(event_id, row_index(row))
        labels = [self.booking.id_to_label(event_id, s) for s in seat_ids]
        return Response({"row": row.upper(), "seat_ids": seat_ids, "labels": labels})


class RowContiguousView(BookingView):
    """Handler for GET /api/events/{event_id}/rows/{row}/contiguous?n="""

    def get(self, request: Request, event_id: int, row: str) -> Response:
        if self.booking.get_event(event_id) is None:
            return not_found("Event not found")
        try:
            n = int(request.query_params.get("n", "1"))
        except ValueError:
            return Response(
                {"code": "INVALID_QUANTITY", "message": "n must be an integer"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        seat_ids = find_contiguous(self.booking, event_id, row_index(row), n)
        return Response({"row": row.upper(), "seat_ids": seat_ids})


class SaleListView(BookingView):
    """Handler for GET /api/sales"""

    def get(self, request: Request) -> Response:
        transactions = self.booking.list_transactions()
        return Response(TransactionSerializer(transactions, many=True, context=self.context()).data)


class EventSaleView(BookingView):
    """Handler for POST /api/events/{event_id}/sales"""

    def post(self, request: Request, event_id: int) -> Response:
        serializer = SaleCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        quantity = data.get("quantity")

        if "seat_ids" in data:
            seat_ids = data["seat_ids"]
        elif "labels" in data:
            seat_ids = seat_selection.parse_labels(self.booking, event_id, data["labels"])
        elif "ids" in data:
            seat_ids = seat_selection.parse_ids(data["ids"])
        else:
            if self.booking.get_event(event_id) is None:
                return not_found("Event not found")
            seat_ids = find_contiguous(self.booking, event_id, row_index(data["row"]), quantity)
            if not seat_ids:
                return Response(
                    {
                        "code": "NO_CONTIGUOUS_BLOCK",
                        "message": f"No {quantity} contiguous free seats in row {data['row'].upper()}",
                    },
                    status=status.HTTP_409_CONFLICT,
                )

        if quantity is not None and len(seat_ids) != quantity:
            return Response(
                {"code": "QUANTITY_MISMATCH", "message": f"Exactly {quantity} seats required"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            transaction = self.booking.sell_seats(event_id, data["customer_id"], seat_ids)
        except DomainError as exc:
            return error_response(exc)
        return Response(
            TransactionSerializer(transaction, context=self.context()).data,
            status=status.HTTP_201_CREATED,
        )


class SaleDetailView(BookingView):
    """Handler for GET/DELETE /api/sales/{transaction_id}"""

    def get(self, request: Request, transaction_id: int) -> Response:
        transaction = self.booking.get_transaction(transaction_id)
        if transaction is None:
            return not_found("Sale not found")
        return Response(TransactionSerializer(transaction, context=self.context()).data)

    def delete(self, request: Request, transaction_id: int) -> Response:
        if not self.booking.delete_transaction(transaction_id):
            return not_found("Sale not found")
        return Response(status=status.HTTP_204_NO_CONTENT)
