"""Receipt data model: pydantic schemas, enums and field value wrappers."""

from .schemas import Item, Receipt  # noqa: F401
from .values import Amount, PurchaseDate, PurchaseTime  # noqa: F401
