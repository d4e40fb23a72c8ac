"""
Prompt builder for structured-output requests.

Renders the provider-agnostic prompt text adapters embed in their payloads:
- System prompt: instructs the model to answer with JSON matching the schema
- Retry prompt: feeds validation errors back to the model

Templates are Jinja2 files shipped in prompts/templates/.
"""

import json
from pathlib import Path
from typing import Any, Optional

import structlog
from jinja2 import Environment, FileSystemLoader

logger = structlog.get_logger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"


class PromptBuilder:
    """
    Render structured-output prompts from Jinja2 templates.
    """

    def __init__(self, templates_dir: Path = TEMPLATES_DIR):
        """
        Initialize prompt builder.

        Args:
            templates_dir: Directory containing system_prompt.txt and retry_prompt.txt
        """
        self.templates_dir = Path(templates_dir)

        self.jinja_env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            autoescape=False  # We're generating prompts, not HTML
        )

        try:
            self.system_template = self.jinja_env.get_template("system_prompt.txt")
            self.retry_template = self.jinja_env.get_template("retry_prompt.txt")
        except Exception as e:
            logger.error("Failed to load prompt templates", error=str(e), templates_dir=str(self.templates_dir))
            raise

        logger.debug("Loaded prompt templates", templates_dir=str(self.templates_dir))

    def build_system_prompt(self, json_schema: dict[str, Any], notes: Optional[str] = None) -> str:
        """
        Render the structured-output system prompt.

        Args:
            json_schema: JSON Schema the response must match
            notes: Optional free-form notes about the schema

        Returns:
            Rendered system prompt
        """
        return self.system_template.render(
            json_schema=json.dumps(json_schema, indent=2, ensure_ascii=False),
            notes=notes,
        ).strip()

    def build_retry_prompt(self, errors: str) -> str:
        """
        Render the corrective follow-up message.

        Args:
            errors: Formatted validation errors (see validation.format_errors)

        Returns:
            Rendered retry prompt
        """
        return self.retry_template.render(errors=errors).strip()
