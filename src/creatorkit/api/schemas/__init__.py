"""Request and response schemas for the creatorkit API."""
