"""Structlog processor adding the storefront's root fields.

Lifts ``service``/``environment`` from the environment and renames the
per-module ``context_component`` binding to ``component``. Uses
dict.pop(key, default) so missing keys never raise.
"""

from __future__ import annotations

import os
from typing import Any


def storefront_fields_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    event_dict.setdefault("service", os.environ.get("SERVICE_NAME", "storefront-state"))
    event_dict.setdefault("environment", os.environ.get("APP_ENV", "local"))
    component = event_dict.pop("context_component", None)
    if component is not None:
        event_dict["component"] = component
    return event_dict
