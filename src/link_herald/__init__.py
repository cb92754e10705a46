"""Matrix bot that summarizes links shared in a monitored room."""
