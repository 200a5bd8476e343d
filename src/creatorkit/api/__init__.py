"""HTTP API for creatorkit."""
