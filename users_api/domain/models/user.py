from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    Pure domain model for User entity - no external dependencies.
    
    first_name and email are free text; no format or uniqueness rules apply.
    The id is assigned by storage on insert and never changes afterwards.
    """
    id: Optional[str]
    first_name: Optional[str] = None
    email: Optional[str] = None
