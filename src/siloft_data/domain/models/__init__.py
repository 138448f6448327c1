"""Domain value types: field kinds and tagged values."""
