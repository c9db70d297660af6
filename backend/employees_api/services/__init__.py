"""Services Layer - one handler per employee operation, explicit dispatch."""
