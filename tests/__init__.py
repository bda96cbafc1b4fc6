"""Tests for ask."""
