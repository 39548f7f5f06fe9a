"""Infrastructure adapters: wire mappers and HTTP transport."""
