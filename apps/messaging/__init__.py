"""Messaging app: contact-form messages between visitors, users and agents."""
