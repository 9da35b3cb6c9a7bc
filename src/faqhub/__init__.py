"""internal-faq-hub: semantic search over plaintext FAQ documents."""

__version__ = "0.1.0"
