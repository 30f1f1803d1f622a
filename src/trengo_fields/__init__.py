"""Trengo webhook handler that copies links from ticket messages into custom fields."""
