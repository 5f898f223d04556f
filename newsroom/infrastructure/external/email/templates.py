"""Mail templates: template key -> subject/body (Jinja)."""

from __future__ import annotations

from typing import Any

from jinja2 import Environment, Template, select_autoescape

_DEFAULT_TEMPLATES: dict[str, tuple[str, str]] = {
    "password_reset_otp": (
        "Verification Email from {{ app_name }}",
        "<div style=\"font-family: Arial, sans-serif; max-width: 480px; margin: 0 auto;\">\n"
        "  <h2>Password reset</h2>\n"
        "  <p>Use the code below to verify your email address.</p>\n"
        "  <p style=\"font-size: 28px; font-weight: bold; letter-spacing: 6px;\">{{ otp }}</p>\n"
        "  <p>The code expires in {{ expires_minutes }} minutes.</p>\n"
        "  <p>If you did not request a password reset, you can ignore this email.</p>\n"
        "</div>\n",
    ),
}


class EmailTemplateRenderer:
    """Renders subject and HTML body for a mail template key."""

    def __init__(self, templates: dict[str, tuple[str, str]] | None = None) -> None:
        self._templates = templates or _DEFAULT_TEMPLATES
        self._env = Environment(autoescape=select_autoescape(default_for_string=True))
        self._compiled: dict[str, tuple[Template, Template]] = {}
        for key, (sub_str, body_str) in self._templates.items():
            self._compiled[key] = (
                self._env.from_string(sub_str),
                self._env.from_string(body_str),
            )

    def render(self, template_key: str, **context: Any) -> tuple[str, str]:
        """Render (subject, html). Raises KeyError if key unknown."""
        if template_key not in self._compiled:
            raise KeyError(f"Unknown mail template: {template_key}")
        subject_tpl, body_tpl = self._compiled[template_key]
        return subject_tpl.render(**context), body_tpl.render(**context)
