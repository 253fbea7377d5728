from homestay.models.message import Message
from homestay.schemas.message import MessageRead
from homestay.storage.base import ReadCreateRepository


class MessageRepository(ReadCreateRepository):
    """Contact messages are write-once: no update or delete."""

    model = Message
    read_schema = MessageRead
    entity = "Message"

    def _order_by(self):
        return [Message.created_at.desc(), Message.id.desc()]
