"""Domain layer - business records, contracts and exceptions."""
