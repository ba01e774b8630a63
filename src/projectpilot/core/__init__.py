"""Core domain: contracts, config, providers, engine, and tools."""
