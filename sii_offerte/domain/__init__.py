"""Domain layer: offer entities and the pure services operating on them."""
