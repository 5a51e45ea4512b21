"""HTTP interface for notifications."""
