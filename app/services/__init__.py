"""Services package - business logic over repositories."""
