from enum import StrEnum


class DesignOrigin(StrEnum):
    LOCAL = "local"
    REMOTE = "remote"
