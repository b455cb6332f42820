"""Store visit route planner."""
