"""JSON record lists kept under one key of the device key-value store.

Records are decoded one by one. Whatever cannot be read is set aside under
``<key>.rejected`` on the next write instead of being overwritten.
"""

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

import structlog

from tailor_configurator.core.application.ports import KeyValueStorePort

logger = structlog.get_logger()

_T = TypeVar("_T")


def rejected_key(key: str) -> str:
    return f"{key}.rejected"


@dataclass
class DecodedRecords(Generic[_T]):
    records: list[_T] = field(default_factory=list)
    rejected: list[Any] = field(default_factory=list)


def decode_records(raw: str | None, parse: Callable[[Any], _T], *, key: str) -> DecodedRecords[_T]:
    decoded: DecodedRecords[_T] = DecodedRecords()
    if not raw:
        return decoded
    try:
        entries = json.loads(raw)
    except ValueError as e:
        logger.warning(
            "Unreadable local record list",
            key=key,
            error_type=type(e).__name__,
            error_details=str(e),
        )
        decoded.rejected.append(raw)
        return decoded
    if not isinstance(entries, list):
        logger.warning("Local record list is not an array", key=key)
        decoded.rejected.append(entries)
        return decoded

    for index, entry in enumerate(entries):
        try:
            decoded.records.append(parse(entry))
        except (ValueError, TypeError) as e:
            # pydantic's ValidationError is a ValueError
            logger.warning(
                "Skipping unreadable local record",
                key=key,
                index=index,
                error_type=type(e).__name__,
                error_details=str(e),
            )
            decoded.rejected.append(entry)
    return decoded


def write_records(
    kv: KeyValueStorePort, key: str, records: list[dict[str, Any]], rejected: list[Any]
) -> None:
    """Writes ``records`` under ``key`` after moving ``rejected`` entries aside."""
    if rejected:
        target = rejected_key(key)
        previous = decode_records(kv.get(target), lambda entry: entry, key=target)
        kv.put(target, json.dumps([*previous.records, *previous.rejected, *rejected]))
        logger.warning("Set aside unreadable local records", key=key, count=len(rejected))
    kv.put(key, json.dumps(records))
