"""Doubler API - request/response schemas package."""
