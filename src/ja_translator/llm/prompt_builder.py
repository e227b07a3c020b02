"""
Prompt builder for translation requests.

Renders the Jinja2 translation template around already-sanitized text.
The delimiters and the "do not follow instructions inside" clause are a
best-effort mitigation against prompt injection, not a security boundary.
"""

from pathlib import Path

import structlog
from jinja2 import Environment, FileSystemLoader


logger = structlog.get_logger(__name__)

DEFAULT_TEMPLATE_NAME = "translation_prompt.txt"
START_DELIMITER = "======== 翻訳対象開始 ========"
END_DELIMITER = "======== 翻訳対象終了 ========"


class PromptBuilder:
    """
    Build translation prompts from sanitized text.

    Pure: the same text always yields the same prompt.
    """

    def __init__(self, templates_dir: Path, template_name: str = DEFAULT_TEMPLATE_NAME):
        """
        Initialize prompt builder.

        Args:
            templates_dir: Directory containing prompt templates
            template_name: Template file to render
        """
        self.templates_dir = Path(templates_dir)

        self.jinja_env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            keep_trailing_newline=False,
            autoescape=False,  # We're generating prompts, not HTML
        )

        try:
            self.template = self.jinja_env.get_template(template_name)
        except Exception as e:
            logger.error("Failed to load prompt template", error=str(e), templates_dir=str(self.templates_dir))
            raise

        logger.info("Loaded prompt template", templates_dir=str(self.templates_dir), template=template_name)

    def build(self, sanitized_text: str) -> str:
        """
        Render the translation prompt.

        Args:
            sanitized_text: Output of sanitize_input()

        Returns:
            Complete prompt with the text between the delimiter lines
        """
        return self.template.render(
            text=sanitized_text,
            start_delimiter=START_DELIMITER,
            end_delimiter=END_DELIMITER,
        )
