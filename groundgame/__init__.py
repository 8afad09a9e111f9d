"""Ground campaign opportunity scoring and simulation."""
