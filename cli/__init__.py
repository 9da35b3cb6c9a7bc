"""Command-line interface for internal-faq-hub."""
