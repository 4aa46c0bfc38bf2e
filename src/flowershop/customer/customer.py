"""Customer aggregate root."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from flowershop.domain import flowershop
from flowershop.shared.email import verify_email_address

_CONTACT_FIELDS = ("first_name", "last_name", "email", "phone", "address")


@flowershop.aggregate
class Customer:
    """A person who places orders with the shop.

    Email addresses are unique across customers and compared exactly as
    entered.
    """

    first_name: String(required=True, max_length=100)
    last_name: String(required=True, max_length=100)
    email: String(required=True, max_length=255, unique=True)
    phone: String(required=True, max_length=20)
    address: String(required=True, max_length=500)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def contact_details_must_not_be_blank(self):
        values = {name: getattr(self, name) for name in _CONTACT_FIELDS}
        blank = [name for name, value in values.items() if value is not None and not value.strip()]
        if blank:
            raise ValidationError({name: ["Value cannot be blank"] for name in blank})

    @invariant.post
    def email_must_be_well_formed(self):
        if self.email:
            verify_email_address(self.email)

    @classmethod
    def register(cls, first_name, last_name, email, phone, address):
        from flowershop.customer.events import CustomerRegistered

        now = datetime.now(UTC)
        customer = cls(
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone=phone,
            address=address,
            created_at=now,
        )
        customer.raise_(
            CustomerRegistered(
                customer_id=customer.id,
                email=email,
                first_name=first_name,
                last_name=last_name,
                registered_at=now,
            )
        )
        return customer

    def update_details(self, first_name, last_name, email, phone, address):
        from flowershop.customer.events import CustomerDetailsUpdated

        self.first_name = first_name
        self.last_name = last_name
        self.email = email
        self.phone = phone
        self.address = address
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CustomerDetailsUpdated(
                customer_id=self.id,
                email=email,
                first_name=first_name,
                last_name=last_name,
            )
        )
