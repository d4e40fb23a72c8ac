"""Prompt templates and the builder that renders them."""

from instruct_lite.prompts.builder import PromptBuilder

__all__ = ["PromptBuilder"]
