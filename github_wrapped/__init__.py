"""GitHub Wrapped: annual activity statistics for a GitHub user."""
