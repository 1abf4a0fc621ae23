"""Backend API service for registration form sessions."""
