"""Runtime configuration for progression-api."""
