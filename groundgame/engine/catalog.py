"""Validation of the static zone and segment catalogs."""

import logging
from typing import Any, Iterable, Mapping, TypeVar, Union

from pydantic import BaseModel, ValidationError

from groundgame.schemas.zone import Segment, Zone

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class CatalogError(ValueError):
    """The static catalog contains an invalid or duplicate entry."""


def _load(
    model: type[ModelT],
    records: Iterable[Union[Mapping[str, Any], ModelT]],
    kind: str,
) -> tuple[ModelT, ...]:
    items: list[ModelT] = []
    seen: set[str] = set()

    for position, record in enumerate(records):
        try:
            item = model.model_validate(record)
        except ValidationError as e:
            raise CatalogError(f"Invalid {kind} at position {position}: {e}") from e

        if item.id in seen:
            raise CatalogError(f"Duplicate {kind} id: {item.id}")
        seen.add(item.id)
        items.append(item)

    if not items:
        raise CatalogError(f"{kind.capitalize()} catalog is empty")

    logger.info(f"[CATALOG] Loaded {len(items)} {kind}s")
    return tuple(items)


def load_zone_catalog(records: Iterable[Union[Mapping[str, Any], Zone]]) -> tuple[Zone, ...]:
    """
    Validate raw zone records.

    Out-of-range values are rejected, never clamped.

    Raises:
        CatalogError: On any invalid record, duplicate id or empty catalog
    """
    return _load(Zone, records, "zone")


def load_segment_catalog(
    records: Iterable[Union[Mapping[str, Any], Segment]],
) -> tuple[Segment, ...]:
    """
    Validate raw segment records.

    Raises:
        CatalogError: On any invalid record, duplicate id or empty catalog
    """
    return _load(Segment, records, "segment")
