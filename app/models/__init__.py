"""Model registry — application code can do::

    from app.models import CropRecord, RecordKind, CropStatusEnum
"""

from app.models.enums import CropStatusEnum, RecordKind
from app.models.records import MAX_SEQUENCE_LENGTH, CropRecord

__all__ = [
    "MAX_SEQUENCE_LENGTH",
    "CropRecord",
    "CropStatusEnum",
    "RecordKind",
]
