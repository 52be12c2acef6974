"""Domain logic for body measurement analysis."""
