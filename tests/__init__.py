"""Test suite for the WiseOwl assistant backend."""
