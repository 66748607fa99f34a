from enum import StrEnum


class ViewMode(StrEnum):
    """Camera angle of the composited preview."""

    FRONT = "front"
    BACK = "back"
