"""Credential and task stores."""
