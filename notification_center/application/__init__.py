"""Application services built on top of the notification store."""
