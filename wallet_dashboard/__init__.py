"""Wallet dashboard: balance pipeline, price valuation and swap helpers."""
