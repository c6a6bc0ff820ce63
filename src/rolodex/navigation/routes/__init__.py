"""Loaders and actions bound to the route table. context is a ContactRepository."""
