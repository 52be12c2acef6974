"""Body measurement dashboard with weight trend projections."""
