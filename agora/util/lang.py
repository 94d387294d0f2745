"""User-facing message catalog.

Routes and use cases never hard-code user-facing error text; they look up a
message key in the catalog for the configured forum language.
"""

from typing import Literal

from agora.config import ForumSettings

Language = Literal["en", "de"]

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "errors.generic": "Sorry, something went wrong. Please try again.",
        "errors.no_access": "Your account does not have access to this action.",
        "errors.no_permission": "You do not have permission to do that.",
        "errors.not_found": "The page you were looking for could not be found.",
        "errors.banned_link": "Your post contains a link that is not allowed.",
        "errors.no_permission_polls": (
            "You do not have permission to create polls, "
            "your topic was created without one."
        ),
        "errors.authentication_required": "You need to be logged in to do that.",
        "errors.invalid_form_token": "Your form has expired, please try again.",
        "moderation.awaiting": "Your topic is awaiting moderation.",
        "topic.created": "Your topic has been created.",
        "notification.new_topic": "A new topic has been posted in {category}",
        "notification.new_topic_subject": "New topic on ",
    },
    "de": {
        "errors.generic": "Leider ist etwas schiefgelaufen. Bitte versuche es erneut.",
        "errors.no_access": "Dein Konto hat keinen Zugriff auf diese Aktion.",
        "errors.no_permission": "Dazu hast du keine Berechtigung.",
        "errors.not_found": "Die gesuchte Seite wurde nicht gefunden.",
        "errors.banned_link": "Dein Beitrag enthält einen nicht erlaubten Link.",
        "errors.no_permission_polls": (
            "Du darfst keine Umfragen erstellen, "
            "dein Thema wurde ohne Umfrage erstellt."
        ),
        "errors.authentication_required": "Dafür musst du angemeldet sein.",
        "errors.invalid_form_token": (
            "Das Formular ist abgelaufen, bitte versuche es erneut."
        ),
        "moderation.awaiting": "Dein Thema wartet auf Freischaltung.",
        "topic.created": "Dein Thema wurde erstellt.",
        "notification.new_topic": "Ein neues Thema wurde in {category} erstellt",
        "notification.new_topic_subject": "Neues Thema auf ",
    },
}


class Lang:
    """Message lookup bound to one language."""

    def __init__(self, forum_settings: ForumSettings) -> None:
        self.language: Language = forum_settings.language

    def __call__(self, key: str, **kwargs: str) -> str:
        """Return the message for ``key``, formatted with ``kwargs``.

        Falls back to English, then to the key itself.
        """
        catalog = MESSAGES.get(self.language, MESSAGES["en"])
        message = catalog.get(key) or MESSAGES["en"].get(key) or key
        return message.format(**kwargs) if kwargs else message
