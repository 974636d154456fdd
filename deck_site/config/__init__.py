from .ini_config import FooterLink, IniConfig, SiteSettings

__all__ = [
    "FooterLink",
    "IniConfig",
    "SiteSettings",
]
