from django.apps import AppConfig


class FormattedTextConfig(AppConfig):
    name = "formatted_text"
    verbose_name = "Formatted text"
