"""Source clients, response mappers and the lookup aggregator."""
