"""Click commands for termlookup."""
