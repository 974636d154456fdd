from __future__ import annotations

import os
from configparser import ConfigParser
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

INI_DEFAULT_NAME = "deck_site.ini"
INI_ENV_VAR = "DECK_SITE_INI"


@dataclass(frozen=True)
class FooterLink:
    label: str
    url: str


@dataclass(frozen=True)
class SiteSettings:
    slides_dir: Path
    output_dir: Path
    favicon_source: Path
    source_assets_dir: Path

    source_extension: str
    rendered_extension: str
    index_file: str
    favicon_file: str

    site_title: str
    site_subtitle: str
    footer_links: tuple[FooterLink, ...]

    required_files: tuple[str, ...]
    required_dirs: tuple[str, ...]
    required_assets: tuple[str, ...]

    flask_host: str
    flask_port: int
    flask_debug: bool

    log_level: str


def _split_list(raw: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in (raw or "").split(",") if item.strip())


def _parse_footer_links(raw: str) -> tuple[FooterLink, ...]:
    links = []
    for item in _split_list(raw):
        label, _, url = item.partition("|")
        label, url = label.strip(), url.strip()
        if label and url:
            links.append(FooterLink(label=label, url=url))
    return tuple(links)


class IniConfig:
    """
    Adapter around ConfigParser and filesystem resolution.
    Keeps INI handling out of the build, verify and web code.
    """

    def __init__(self, ini_path: Path):
        self._ini_path = ini_path
        self._cfg = ConfigParser()
        read_ok = self._cfg.read(str(ini_path), encoding="utf-8-sig")
        if not read_ok:
            raise FileNotFoundError(f"INI file not found or unreadable: {ini_path}")

    @property
    def ini_path(self) -> Path:
        return self._ini_path

    @staticmethod
    def for_path(ini_path: Path) -> "IniConfig":
        return IniConfig(Path(ini_path))

    @staticmethod
    def from_env_or_default(explicit: Optional[Path] = None) -> "IniConfig":
        if explicit is not None:
            return IniConfig(Path(explicit))
        ini_raw = (os.getenv(INI_ENV_VAR) or "").strip()
        # Without DECK_SITE_INI, fall back to the repo-root ini
        ini_path = Path(ini_raw) if ini_raw else (Path(__file__).resolve().parents[2] / INI_DEFAULT_NAME)
        return IniConfig(ini_path)

    def _get(self, section: str, key: str, fallback: str) -> str:
        return (self._cfg.get(section, key, fallback=fallback) or "").strip() or fallback

    def _cfg_path(self, section: str, key: str, fallback: str) -> Path:
        """
        Reads a filesystem path from INI and resolves it against the INI directory.
        Tries [paths] and [path] interchangeably for convenience.
        """
        sections_to_try = [section]
        if section == "paths":
            sections_to_try.append("path")
        if section == "path":
            sections_to_try.append("paths")

        raw = ""
        for sec in sections_to_try:
            if not self._cfg.has_section(sec):
                continue
            raw = (self._cfg.get(sec, key, fallback="") or "").strip()
            if raw:
                break

        raw = os.path.expandvars(os.path.expanduser(raw or fallback))
        p = Path(raw)
        if not p.is_absolute():
            p = self._ini_path.resolve().parent / p
        return p.resolve()

    def load_settings(self) -> SiteSettings:
        slides_dir = self._cfg_path("paths", "slides_dir", "slides")
        output_dir = self._cfg_path("paths", "output_dir", "dist")
        favicon_source = self._cfg_path("paths", "favicon_source", "themes/assets/favicon.ico")
        source_assets_dir = self._cfg_path("paths", "source_assets_dir", str(slides_dir / "assets"))

        source_extension = self._get("build", "source_extension", ".md")
        rendered_extension = self._get("build", "rendered_extension", ".html")
        index_file = self._get("build", "index_file", "index.html")
        favicon_file = self._get("build", "favicon_file", "favicon.ico")

        site_title = self._get("site", "title", "Presentations")
        site_subtitle = self._cfg.get("site", "subtitle", fallback="").strip()
        footer_links = _parse_footer_links(self._cfg.get("site", "footer_links", fallback=""))

        required_files = _split_list(
            self._cfg.get("verify", "required_files", fallback=f"{index_file}, {favicon_file}")
        )
        required_dirs = _split_list(self._cfg.get("verify", "required_dirs", fallback=""))
        required_assets = _split_list(self._cfg.get("verify", "required_assets", fallback=""))

        # Flask
        flask_host = self._get("flask", "host", "127.0.0.1")
        flask_port = self._cfg.getint("flask", "port", fallback=8080)
        flask_debug = self._cfg.getboolean("flask", "debug", fallback=False)

        log_level = self._get("logging", "level", "INFO").upper()

        # Validate
        for ext_name, ext in (("source_extension", source_extension), ("rendered_extension", rendered_extension)):
            if not ext.startswith("."):
                raise ValueError(f"build.{ext_name} must start with '.': {ext!r}")

        return SiteSettings(
            slides_dir=slides_dir,
            output_dir=output_dir,
            favicon_source=favicon_source,
            source_assets_dir=source_assets_dir,
            source_extension=source_extension,
            rendered_extension=rendered_extension,
            index_file=index_file,
            favicon_file=favicon_file,
            site_title=site_title,
            site_subtitle=site_subtitle,
            footer_links=footer_links,
            required_files=required_files,
            required_dirs=required_dirs,
            required_assets=required_assets,
            flask_host=flask_host,
            flask_port=flask_port,
            flask_debug=flask_debug,
            log_level=log_level,
        )
