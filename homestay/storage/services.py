from homestay.models.service import Service
from homestay.schemas.service import ServiceRead
from homestay.storage.base import Repository


class ServiceRepository(Repository):
    model = Service
    read_schema = ServiceRead
    entity = "Service"

    def _order_by(self):
        return [Service.id.asc()]
