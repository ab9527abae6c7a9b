"""Input side: source list, line filter and the feeder thread."""
