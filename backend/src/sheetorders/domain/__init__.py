"""Domain layer: order shapes, schema and provider ports."""
