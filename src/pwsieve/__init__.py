"""pwsieve package.

The objects listed in ``__all__`` form the supported public surface.
"""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from pwsieve.breach import BreachClient
from pwsieve.config import ValidatorOptions, recommended_options
from pwsieve.errors import (
    BreachedPasswordError,
    BreachLookupError,
    DictionaryError,
    EmptyPasswordError,
    HashedDictionaryError,
    MangledDictionaryError,
    PwSieveError,
    RejectReason,
    TooFewCharsError,
    TooShortError,
    TooSystematicError,
    WeakPasswordError,
)
from pwsieve.strength import PasswordStrength
from pwsieve.validator import Validator, Verdict

__all__ = [
    "BreachClient",
    "BreachLookupError",
    "BreachedPasswordError",
    "DictionaryError",
    "EmptyPasswordError",
    "HashedDictionaryError",
    "MangledDictionaryError",
    "PasswordStrength",
    "PwSieveError",
    "RejectReason",
    "TooFewCharsError",
    "TooShortError",
    "TooSystematicError",
    "Validator",
    "ValidatorOptions",
    "Verdict",
    "WeakPasswordError",
    "__version__",
    "recommended_options",
]

try:
    __version__ = version("pwsieve")
except PackageNotFoundError:  # pragma: no cover - happens only from source checkout
    __version__ = "0.0.0-dev"
