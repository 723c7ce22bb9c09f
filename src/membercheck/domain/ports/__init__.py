"""Domain ports (interfaces implemented by infrastructure)."""

from membercheck.domain.ports.introspector import TypeIntrospector

__all__ = ["TypeIntrospector"]
