"""Tests for autoinstall."""
