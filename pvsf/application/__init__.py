"""Application layer: session predicates and legacy-shape transformers.

Pure code only; no I/O. Routes combine these with the Firestore repositories.
"""

from pvsf.application.session import Session, is_admin, is_authenticated
from pvsf.application.transformers import (
    format_time,
    transform_user_to_legacy,
    transform_video_to_legacy,
)

__all__ = [
    "Session",
    "format_time",
    "is_admin",
    "is_authenticated",
    "transform_user_to_legacy",
    "transform_video_to_legacy",
]
