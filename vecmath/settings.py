"""Configuration for how vector helpers treat zero-magnitude input."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Optional

LOGGER = logging.getLogger(__name__)


class ZeroVectorPolicy(str, Enum):
    """Behaviour of ``normalize`` and ``angle`` at the zero vector."""

    PROPAGATE = "propagate"
    RAISE = "raise"


# //1.- Frozen dataclass so a settings object can be shared across threads.
@dataclass(frozen=True)
class VectorSettings:
    """Knobs for the policy-aware helpers in :mod:`vecmath.guarded`."""

    zero_vector_policy: ZeroVectorPolicy = ZeroVectorPolicy.PROPAGATE

    # //2.- Build settings from a plain mapping such as a parsed config file.
    @classmethod
    def from_mapping(cls, payload: Optional[Mapping[str, str]] = None) -> "VectorSettings":
        if not payload:
            return cls()
        raw = payload.get("zero_vector_policy", ZeroVectorPolicy.PROPAGATE.value)
        try:
            policy = ZeroVectorPolicy(str(raw).strip().lower())
        except ValueError:
            choices = ", ".join(member.value for member in ZeroVectorPolicy)
            raise ValueError(f"Unknown zero_vector_policy {raw!r}; expected one of: {choices}") from None
        return cls(zero_vector_policy=policy)

    # //3.- Read overrides from the environment, only when asked to.
    @classmethod
    def from_environment(cls, prefix: str = "VECMATH") -> "VectorSettings":
        mapping: Dict[str, str] = {}
        policy = os.getenv(f"{prefix}_ZERO_VECTOR_POLICY")
        if policy is not None:
            mapping["zero_vector_policy"] = policy
        return cls.from_mapping(mapping)


def load_vector_settings(
    mapping: Optional[Mapping[str, str]] = None,
    *,
    env_prefix: Optional[str] = None,
) -> VectorSettings:
    """Resolve settings from a mapping, the environment, or defaults, in that order."""

    if mapping is not None:
        settings = VectorSettings.from_mapping(mapping)
        source = "mapping"
    elif env_prefix is not None:
        settings = VectorSettings.from_environment(prefix=env_prefix)
        source = f"environment ({env_prefix}_*)"
    else:
        settings = VectorSettings()
        source = "defaults"
    LOGGER.debug("Resolved zero vector policy %s from %s", settings.zero_vector_policy.value, source)
    return settings


__all__ = ["ZeroVectorPolicy", "VectorSettings", "load_vector_settings"]
