"""Service-level errors.

Routes translate these into HTTP responses, the service layer itself never
raises HTTP errors.
"""


class ServiceError(Exception):
    """Base class for all service errors."""


class ProductNotFoundError(ServiceError):
    def __init__(self, product_id: int):
        super().__init__("Product not found")
        self.product_id = product_id


class ConstraintViolationError(ServiceError):
    """A write was rejected by a store constraint."""


class BarcodeConflictError(ConstraintViolationError):
    def __init__(self, barcode: str):
        super().__init__("Barcode already exists")
        self.barcode = barcode


class PersistenceError(ServiceError):
    """The store failed for a reason other than a constraint."""
