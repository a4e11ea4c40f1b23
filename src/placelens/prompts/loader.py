"""
Prompt template loading.

Prompts are Markdown files next to this module. Each may open with a YAML
front matter block declaring its `version`, a `description` and the variables
it `requires`; rendering fails fast when a required variable is not supplied.
"""

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Mapping

import yaml
from jinja2 import BaseLoader, Environment, StrictUndefined

logger = logging.getLogger(__name__)

PROMPTS_DIR = Path(__file__).parent
FRONTMATTER_DELIMITER = "---"

_env = Environment(
    loader=BaseLoader(),
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=StrictUndefined,
)


@dataclass(frozen=True)
class PromptTemplate:
    id: str
    content: str
    version: str = "v1"
    description: str = ""
    requires: List[str] = field(default_factory=list)

    @classmethod
    def from_text(cls, prompt_id: str, text: str) -> "PromptTemplate":
        metadata, content = _parse_frontmatter(text)
        return cls(
            id=prompt_id,
            content=content,
            version=str(metadata.get("version", "v1")),
            description=metadata.get("description", ""),
            requires=list(metadata.get("requires") or []),
        )

    def missing_vars(self, variables: Mapping[str, Any]) -> List[str]:
        return [name for name in self.requires if name not in variables]

    def render(self, **variables) -> str:
        missing = self.missing_vars(variables)
        if missing:
            raise ValueError(
                f"Missing required vars for prompt '{self.id}' ({self.version}): {missing}; "
                f"requires {self.requires}"
            )
        return _env.from_string(self.content).render(**variables)


def get_prompt_path(prompt_id: str) -> Path:
    return PROMPTS_DIR / f"{prompt_id}.md"


@lru_cache(maxsize=32)
def _load_prompt_file(prompt_id: str) -> PromptTemplate:
    path = get_prompt_path(prompt_id)
    if not path.exists():
        raise FileNotFoundError(f"Prompt file not found: {path}")
    return PromptTemplate.from_text(prompt_id, path.read_text(encoding="utf-8"))


def _parse_frontmatter(text: str) -> tuple[Dict[str, Any], str]:
    if not text.startswith(FRONTMATTER_DELIMITER):
        return {}, text

    _, header, body = (text.split(FRONTMATTER_DELIMITER, 2) + ["", ""])[:3]
    if not body:
        return {}, text

    try:
        metadata = yaml.safe_load(header) or {}
    except yaml.YAMLError as e:
        logger.warning(f"Ignoring invalid prompt front matter: {e}")
        return {}, body.strip()

    if not isinstance(metadata, dict):
        logger.warning("Ignoring prompt front matter that is not a mapping")
        metadata = {}
    return metadata, body.strip()


def load_prompt(prompt_id: str, **variables) -> str:
    """Render a bundled prompt, raising ValueError if a required variable is missing."""
    return _load_prompt_file(prompt_id).render(**variables)


def reload_prompts() -> None:
    _load_prompt_file.cache_clear()
