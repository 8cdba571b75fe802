"""Test suite package for treedigest."""
