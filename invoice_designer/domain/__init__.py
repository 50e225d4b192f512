"""Domain model: entities, binding resolution and static design data."""
