"""Type definitions for linkeddeque."""

from typing import TypeVar

# Generic payload type
T = TypeVar("T")
