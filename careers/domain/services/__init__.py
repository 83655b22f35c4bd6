# Domain Services
from .email_templates import EmailTemplates, RenderedTemplate

__all__ = ["EmailTemplates", "RenderedTemplate"]
