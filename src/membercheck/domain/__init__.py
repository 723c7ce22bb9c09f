"""Domain layer: member model, predicates, ports and exceptions."""
