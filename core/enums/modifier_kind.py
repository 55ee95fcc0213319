from __future__ import annotations

from enum import Enum


class ModifierKind(str, Enum):
    """Lifetime of a grid modifier.

    Permanent modifiers stay in the ledger for the whole session, temporary ones
    expire after a declared number of turns.
    """

    PERMANENT = "permanent"
    TEMPORARY = "temporary"


class EffectCategory(str, Enum):
    """Game systems that emit grid modifiers."""

    CHARM = "charm"
    PHONE_CALL = "phone_call"
