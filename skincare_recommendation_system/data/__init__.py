"""Static quiz and catalogue data."""
