"""Domain layer - image records, key space rules and record handlers."""
