"""English-Vietnamese dictionary with ordered lookup, completion, suggestions and search history."""

__version__ = "0.1.0"
__all__ = ["jrb", "dllist", "fields", "dictionary", "loader", "history", "cli"]