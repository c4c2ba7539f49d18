from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from gadispatch.features.attribution.types import AttributionFields

from .schema import (
    ACTION,
    CAMPAIGN_CONTENT,
    CAMPAIGN_MEDIUM,
    CAMPAIGN_NAME,
    CAMPAIGN_SOURCE,
    CATEGORY,
    HIT_TYPE,
    HIT_TYPE_EVENT,
    LABEL,
    LABEL_VALUE,
    HitParameters,
)


def assemble(
    action: str,
    category: str | None,
    fields: AttributionFields,
    extra: Mapping[str, str | None] | None = None,
) -> HitParameters:
    """
    Build the finished, read-only parameter mapping for one hit.

    Attribution dimensions that resolved to None are left out; entries of
    `extra` are copied as-is, None values included.
    """
    params: dict[str, str | None] = {
        HIT_TYPE: HIT_TYPE_EVENT,
        ACTION: action,
        LABEL: LABEL_VALUE,
    }
    if category is not None:
        params[CATEGORY] = category

    for key, value in (
        (CAMPAIGN_SOURCE, fields.source),
        (CAMPAIGN_MEDIUM, fields.medium),
        (CAMPAIGN_NAME, fields.name),
        (CAMPAIGN_CONTENT, fields.content),
    ):
        if value is not None:
            params[key] = value

    if extra:
        params.update(extra)

    return MappingProxyType(params)
