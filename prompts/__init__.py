"""Prompt templates passed to the chat model."""
