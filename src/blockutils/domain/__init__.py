"""Domain layer: generation logic with no platform dependencies beyond a random source."""
