"""Pre-deployment GraphQL security notices."""
