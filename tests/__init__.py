"""Tests for mdquill."""
