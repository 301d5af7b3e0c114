"""Infrastructure layer - DI, logging, persistence strategies."""
