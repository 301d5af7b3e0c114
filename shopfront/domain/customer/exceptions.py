"""Customer domain exceptions."""

from shopfront.domain.base.exceptions import EntityNotFoundError


class CustomerNotFoundError(EntityNotFoundError):
    """Raised when a customer is not found."""

    def __init__(self, customer_id):
        super().__init__(
            "Customer",
            customer_id,
            message=f"Customer not found: {customer_id}",
        )
        self.customer_id = customer_id
