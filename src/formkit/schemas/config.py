"""
Defines structured configuration models using dataclasses.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class BuilderConfig:
    """Configuration for a form builder.

    Attributes:
        template_path: Optional path to a Jinja2 input template. The bundled
            Bootstrap template is used when unset.
        autoescape: Whether template output is HTML-escaped.
        skip: Field names that are never rendered.
        selects: Options per field name, label -> stored value.
    """

    template_path: str | None = None
    autoescape: bool = True
    skip: list[str] = field(default_factory=list)
    selects: dict[str, dict[str, Any]] = field(default_factory=dict)
