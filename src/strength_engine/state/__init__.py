"""State reconstruction: progress view, feedback queries and exercise swaps."""
