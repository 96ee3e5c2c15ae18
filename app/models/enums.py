"""Enum types for crop records.

``RecordKind`` separates plans from planted crops explicitly; the external
seed dataset overloads its ``type`` field with a ``rotation_plan`` sentinel
instead, which the seed loader translates into this tag.
"""

from enum import StrEnum


class RecordKind(StrEnum):
    """Whether a record is a planted crop or a forward-looking rotation plan."""

    crop = "crop"
    rotation_plan = "rotation_plan"


class CropStatusEnum(StrEnum):
    """Lifecycle status of a crop record."""

    planted = "planted"
    growing = "growing"
    ready = "ready"
    harvested = "harvested"
    planned = "planned"
