"""Tests for the forest fire automaton."""
