"""Translation Stats settings service."""
