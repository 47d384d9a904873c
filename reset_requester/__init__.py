"""Manual check for the backend's forgot-password endpoint."""
