"""Address domain exceptions."""

from shopfront.domain.base.exceptions import EntityNotFoundError


class AddressNotFoundError(EntityNotFoundError):
    """Raised when no address is registered for a postal code."""

    def __init__(self, postal_code: str):
        super().__init__(
            "Address",
            postal_code,
            message=f"Address not found for key {postal_code}",
        )
        self.postal_code = postal_code
