"""Tests for the Anchor recurrence engine."""
