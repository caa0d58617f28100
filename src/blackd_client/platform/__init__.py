"""Infrastructure adapters: filesystem, logging and the blackd transport."""
