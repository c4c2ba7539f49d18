from __future__ import annotations

from collections.abc import Mapping

# Google Analytics measurement protocol parameter names. These are an
# external contract with the analytics backend: do not rename.
HIT_TYPE = "&t"
ACTION = "&ea"
CATEGORY = "&ec"
LABEL = "&el"

CAMPAIGN_SOURCE = "&cs"
CAMPAIGN_MEDIUM = "&cm"
CAMPAIGN_NAME = "&cn"
CAMPAIGN_CONTENT = "&cc"

# In-app events only; always emitted, even when the payload has no tracking id
TRACKING_ID = "batch_tracking_id"

HIT_TYPE_EVENT = "event"
LABEL_VALUE = "batch"

HitParameters = Mapping[str, str | None]
