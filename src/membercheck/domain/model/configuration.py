"""Selection configuration."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SelectionConfig:
    """Member selection settings.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        include_inherited: Also select members declared on base classes
            (walks the MRO, object excluded).
    """

    include_inherited: bool = True
