"""Structured log message templates for consistent, human-readable logging.

Hey future me - instead of a bare "Request failed" we log:

    🔴 TIDAL Request Failed
    ├─ Path: /albums/123/tracks
    ├─ Params: {"limit": 999, "countryCode": "US"}
    ├─ Reason: Client error '404 Not Found' for url ...
    └─ 💡 Check the id and that the item is available in the session's country

Principles: icon first, then what happened, then context fields, then a hint.

Usage:
    from tidalhifi.infrastructure.observability.log_messages import LogMessages

    logger.error(LogMessages.request_failed(path="/search", params=params, error=str(e)))
"""

import json
from dataclasses import dataclass
from typing import Any


@dataclass
class LogTemplate:
    """A reusable log message template with placeholders.

    format() replaces {placeholders} in field values and the hint, and lays the
    result out as a small tree under the icon + title line.
    """

    icon: str
    title: str
    fields: dict[str, str]
    hint: str | None = None

    def format(self, **kwargs: Any) -> str:
        """Format the template with provided values.

        Args:
            **kwargs: Values to fill into template placeholders

        Returns:
            Formatted multi-line log message with icon, title, fields, and optional hint
        """
        lines = [f"{self.icon} {self.title}"]

        field_items = list(self.fields.items())
        for i, (key, value_template) in enumerate(field_items):
            # Last field uses └─ instead of ├─
            prefix = "└─" if i == len(field_items) - 1 and not self.hint else "├─"

            try:
                value = value_template.format(**kwargs)
            except KeyError as e:
                value = f"<missing: {e}>"

            lines.append(f"{prefix} {key}: {value}")

        if self.hint:
            try:
                hint_text = self.hint.format(**kwargs)
            except KeyError as e:
                hint_text = f"<missing: {e}>"
            lines.append(f"└─ 💡 {hint_text}")

        return "\n".join(lines)


def _escape(value: str) -> str:
    # Values go through str.format() again inside LogTemplate
    return value.replace("{", "{{").replace("}", "}}")


class LogMessages:
    """Collection of standardized TIDAL log message templates.

    Template categories:
    - Authentication (login success/failure, missing session)
    - Requests (read call failures)
    """

    # === Authentication ===

    @staticmethod
    def login_succeeded(user_id: Any, country_code: str | None) -> str:
        """Format a successful login message."""
        template = LogTemplate(
            icon="✅",
            title="TIDAL Login Succeeded",
            fields={
                "User": _escape(str(user_id)),
                "Country": _escape(str(country_code)),
            },
        )
        return template.format()

    @staticmethod
    def login_failed(username: str, error: str | None = None) -> str:
        """Format a login failure message.

        Args:
            username: Account that tried to log in (never log the password!)
            error: Error message from exception
        """
        fields = {"Username": _escape(username)}
        if error:
            fields["Reason"] = _escape(error)

        template = LogTemplate(
            icon="🔴",
            title="TIDAL Login Failed",
            fields=fields,
            hint="Check username, password and the X-Tidal-Token application token",
        )
        return template.format()

    @staticmethod
    def not_logged_in(path: str) -> str:
        """Format a message for a read attempted without a session."""
        template = LogTemplate(
            icon="⚠️",
            title="TIDAL Call Without Session",
            fields={"Path": _escape(path)},
            hint="Await login() before calling any read method",
        )
        return template.format()

    # === Requests ===

    @staticmethod
    def request_failed(
        path: str,
        params: dict[str, Any],
        error: str | None = None,
    ) -> str:
        """Format a failed read call message.

        Args:
            path: API path that was called (e.g. "/albums/123")
            params: Query parameters that were sent
            error: Error message from exception
        """
        fields = {
            "Path": _escape(path),
            "Params": _escape(json.dumps(params, default=str)),
        }
        if error:
            fields["Reason"] = _escape(error)

        template = LogTemplate(
            icon="🔴",
            title="TIDAL Request Failed",
            fields=fields,
            hint="Check the id and that the item is available in the session's country",
        )
        return template.format()
