"""Serializers for transforming domain models to API responses and parsing input."""

from rest_framework import serializers

from boxoffice.domain import CustomerClass

CLASSIFICATION_CHOICES = [c.value for c in CustomerClass]


class CustomerSerializer(serializers.Serializer):
    """Serializer for Customer domain model."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    classification = serializers.CharField(source="classification.value")


class CustomerCreateSerializer(serializers.Serializer):
    name = serializers.CharField(allow_blank=True, trim_whitespace=False)
    classification = serializers.ChoiceField(choices=CLASSIFICATION_CHOICES)

    def validate_classification(self, value: str) -> CustomerClass:
        return CustomerClass.from_string(value)


class CustomerUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True)
    classification = serializers.ChoiceField(choices=CLASSIFICATION_CHOICES, required=False)

    def validate_classification(self, value: str) -> CustomerClass:
        return CustomerClass.from_string(value)


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model.

    Availability figures need the booking service in the serializer context.
    """

    id = serializers.IntegerField()
    name = serializers.CharField()
    rows = serializers.IntegerField()
    columns = serializers.IntegerField()
    base_price = serializers.CharField()
    capacity = serializers.IntegerField(source="capacity.value")
    free_seats = serializers.SerializerMethodField()
    sales = serializers.SerializerMethodField()

    def get_free_seats(self, event) -> int:
        return self.context["booking"].free_seat_count(event)

    def get_sales(self, event) -> int:
        return len(event.transactions)


class EventCreateSerializer(serializers.Serializer):
    name = serializers.CharField(allow_blank=True)
    rows = serializers.IntegerField()
    columns = serializers.IntegerField()
    base_price = serializers.DecimalField(max_digits=12, decimal_places=2)


class EventUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True)
    base_price = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0, required=False
    )


class TransactionSerializer(serializers.Serializer):
    """Serializer for Transaction domain model."""

    id = serializers.IntegerField()
    event_id = serializers.IntegerField()
    customer_id = serializers.IntegerField()
    seat_ids = serializers.ListField(child=serializers.IntegerField())
    seat_labels = serializers.SerializerMethodField()
    timestamp = serializers.DateTimeField()
    gross_amount = serializers.CharField()
    discount_amount = serializers.CharField()
    net_amount = serializers.CharField()

    def get_seat_labels(self, transaction) -> list[str]:
        booking = self.context["booking"]
        return [booking.id_to_label(transaction.event_id, s) for s in transaction.seat_ids]


class SaleCreateSerializer(serializers.Serializer):
    """A sale request naming its seats in exactly one way."""

    SELECTORS = ("seat_ids", "labels", "ids", "row")

    customer_id = serializers.IntegerField()
    seat_ids = serializers.ListField(child=serializers.IntegerField(), required=False)
    labels = serializers.CharField(required=False)
    ids = serializers.CharField(required=False)
    row = serializers.RegexField(r"^[A-Za-z]$", required=False)
    quantity = serializers.IntegerField(required=False, min_value=1)

    def validate(self, attrs: dict) -> dict:
        chosen = [s for s in self.SELECTORS if s in attrs]
        if len(chosen) != 1:
            raise serializers.ValidationError(
                "Provide exactly one of seat_ids, labels, ids or row."
            )
        if "row" in attrs and "quantity" not in attrs:
            raise serializers.ValidationError({"quantity": "Required when selecting by row."})
        return attrs
