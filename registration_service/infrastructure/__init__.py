"""Infrastructure layer: MongoDB / in-memory repositories and SMTP notifications."""
