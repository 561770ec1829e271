"""Service catalog storage."""

from app.models.services import services
from app.repositories.base import OwnedRepository


class ServiceRepository(OwnedRepository):
    """Catalog services of one owner, ordered by name."""

    table = services
    order_by = ("name",)
