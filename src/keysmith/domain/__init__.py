"""Domain layer - generation and scoring logic with no outer dependencies."""
