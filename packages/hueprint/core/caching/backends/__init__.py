"""Vector cache backends."""
