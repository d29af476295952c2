"""Helper tools built on top of the client."""
