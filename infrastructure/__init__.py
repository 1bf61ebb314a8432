"""Storage and delivery adapters behind the service protocols."""
