"""Infrastructure adapters: configuration files and source trees."""
