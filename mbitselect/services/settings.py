"""
Settings - command line and environment configuration
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator

from mbitselect.providers.board import MicrobitVersion

ENV_FALLBACK = "MBITSELECT_FALLBACK"
ENV_VERBOSE = "MBITSELECT_VERBOSE"

TRUTHY_VALUES = ("1", "true", "yes", "on")


class Settings(BaseModel):
    """Validated run configuration"""

    fallback: MicrobitVersion = MicrobitVersion.default()
    verbose: bool = False

    @field_validator("fallback", mode="before")
    @classmethod
    def validate_fallback(cls, v):
        """Only the known target identifiers are accepted"""
        if isinstance(v, MicrobitVersion):
            return v
        if not isinstance(v, str) or not MicrobitVersion.is_valid(v):
            raise ValueError('must be one of "microbit" or "microbit-v2"')
        return MicrobitVersion(v)

    @classmethod
    def from_args(cls, fallback: Optional[str] = None, verbose: Optional[bool] = None,
                  environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from parsed flags, falling back to environment variables.

        Flags left as None take their value from MBITSELECT_FALLBACK and
        MBITSELECT_VERBOSE, then from the model defaults.

        Raises:
            pydantic.ValidationError: fallback is not a known identifier
        """
        environ = os.environ if environ is None else environ
        values = {}

        if fallback is None:
            fallback = environ.get(ENV_FALLBACK)
        if fallback is not None:
            values["fallback"] = fallback

        if verbose is None and ENV_VERBOSE in environ:
            verbose = environ[ENV_VERBOSE].strip().lower() in TRUTHY_VALUES
        if verbose is not None:
            values["verbose"] = verbose

        return cls(**values)
