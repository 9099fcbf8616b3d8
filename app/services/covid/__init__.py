"""COVID services - statistics and analytics."""
