"""User interfaces for dagrun."""
