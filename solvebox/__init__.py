"""Classic algorithm solutions grouped by theme: grids, sequences, numbers,
strings, folders, graphs, games and scheduling."""

__version__ = "0.1.0"
__all__ = [
    "folders",
    "games",
    "graphs",
    "grids",
    "numbers",
    "scheduling",
    "sequences",
    "strings",
]