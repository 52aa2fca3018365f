"""Serializers that turn the result table into output text."""
