"""Infrastructure: persistence, notification delivery, token verification."""
