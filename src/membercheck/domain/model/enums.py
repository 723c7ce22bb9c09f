"""Domain enumerations."""

from enum import Enum, auto


class Visibility(Enum):
    """Declared visibility of a class member."""

    PUBLIC = auto()  # name
    INTERNAL = auto()  # explicit @internal only
    PROTECTED = auto()  # _name
    PRIVATE = auto()  # __name


class MemberKind(Enum):
    """Kind of class member a selector enumerates."""

    PROPERTY = "properties"
    METHOD = "methods"

    @property
    def plural(self) -> str:
        """Plural noun used in failure messages."""
        return self.value
