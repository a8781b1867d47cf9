"""Language file maintenance package.

Provides the ordered translation set consumed by the generator, file
loading from disk, and the update workflow that regenerates a file for the
current set of application strings.

Submodules:
    ordered  - TranslationList (insertion-ordered entries with old translations)
    loading  - LngFileLoader, LngLoadResult
    workflow - update_lng, new_header

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from lngkit.enums import LoadStatus
from lngkit.localization.loading import LngFileLoader, LngLoadResult
from lngkit.localization.ordered import TranslationList
from lngkit.localization.workflow import new_header, update_lng

__all__ = [
    # Entry collection
    "TranslationList",
    # Loading
    "LngFileLoader",
    "LngLoadResult",
    "LoadStatus",
    # Workflow
    "new_header",
    "update_lng",
]
