"""Decision core for autonomous agents in a turn-based island grid world."""
