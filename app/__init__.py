"""COVID explorer application package."""
