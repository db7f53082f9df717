"""OU Picker widgets."""

from .banner import Banner
from .ou_list import OUList

__all__ = [
    "Banner",
    "OUList",
]
