"""Utility helpers for Project Hub."""
