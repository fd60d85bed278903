"""Platform capability checks consulted after profile lookup.

A profile says which types a kernel is written for. Whether the platform can
run a type is a separate question. Today only bfloat16 is gated. It stays
off the registry and the profiles so one profile can behave differently
depending on an explicit flag.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping

from typedispatch.types import ScalarType

logger = logging.getLogger(__name__)

BFLOAT16_ENV_VAR = "TYPEDISPATCH_BFLOAT16"

_FALSY = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True, slots=True)
class PlatformCapabilities:
    """Which capability-gated scalar types the current platform can run.

    Attributes:
        bfloat16: Whether bfloat16 kernels may be invoked.
    """

    bfloat16: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.bfloat16, bool):
            raise TypeError(f"bfloat16 must be a bool, got {type(self.bfloat16).__name__}")

    def supports(self, tag: ScalarType) -> bool:
        if tag == ScalarType.BFloat16:
            return self.bfloat16
        return True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> PlatformCapabilities:
        """Read capability flags from the environment.

        `TYPEDISPATCH_BFLOAT16` set to 0/false/no/off disables bfloat16.
        Anything else, or leaving it unset, enables it.
        """
        env = os.environ if environ is None else environ
        raw = env.get(BFLOAT16_ENV_VAR)
        bf16 = raw is None or raw.strip().lower() not in _FALSY
        return cls(bfloat16=bf16)


@lru_cache(maxsize=1)
def default_capabilities() -> PlatformCapabilities:
    """Capabilities of this process, detected once."""
    caps = PlatformCapabilities.from_env()
    logger.debug("detected platform capabilities: %s", caps)
    return caps
