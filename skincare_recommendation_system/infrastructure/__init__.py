"""Infrastructure package - LLM providers and structured logging."""
