"""Transport clients, configuration and the cache cell."""
