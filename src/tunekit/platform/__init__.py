"""Infrastructure shared by tunekit features: HTTP engine and logging."""
