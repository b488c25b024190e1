"""Application-layer plumbing: unit of work and message bus."""
