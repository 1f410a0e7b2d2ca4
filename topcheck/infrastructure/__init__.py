"""Infrastructure adapters: HTTP transport and observability."""
